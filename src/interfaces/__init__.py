"""Public interface definitions for external collaborators.

Every lookup service, the cache store, and the progress display are
accessed exclusively through the abstract base classes in this package.
Concrete adapters live in ``src/providers/`` (and ``src/cli/progress.py``
for the terminal progress bar) and are wired together in ``src/main.py``.

CONCRETE PROVIDER MAP:
    Interface        →  Concrete implementations
    ─────────────────────────────────────────────────────────
    IResolver        →  CreditChinaResolver, CninfoResolver
    ICacheStore      →  JsonFileCacheStore
    IProgressSink    →  RichProgressSink, NullProgressSink
"""

from src.interfaces.cache_store import ICacheStore
from src.interfaces.progress_sink import IProgressSink, NullProgressSink
from src.interfaces.resolver import IResolver

__all__ = [
    "ICacheStore",
    "IProgressSink",
    "IResolver",
    "NullProgressSink",
]
