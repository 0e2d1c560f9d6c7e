"""Abstract base class for company lookup resolvers.

A resolver encapsulates one external lookup workflow: it maps a single
company name to a :data:`~src.models.outcome.ResolveResult`.  The batch
engine is resolver-agnostic; adding a data source means adding an adapter
here, never a special case in the engine.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from src.models.outcome import ResolveResult


class IResolver(ABC):
    """Contract for per-key company lookups.

    Implementations hold only read-only configuration (strict-name flag,
    result limits, market filters) plus an injected HTTP client, so one
    instance can serve every key of a batch concurrently.
    """

    #: File name of this resolver's cache inside the data directory.
    cache_filename: str = "cache.json"

    @abstractmethod
    async def resolve(self, key: str) -> ResolveResult:
        """Resolve one company name.

        Parameters
        ----------
        key:
            The company name exactly as supplied by the user.

        Returns
        -------
        Fresh | Absent | Failure
            Never raises for transport errors, unexpected response shapes,
            or empty result sets; those are returned as ``Failure``.
        """

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return a short identifier for the lookup service (e.g. ``"cninfo"``)."""

    def dump_value(self, value: Any) -> Any:
        """Convert a resolved value to its JSON-serializable cache form."""
        return value

    def load_value(self, raw: Any) -> Any:
        """Rebuild a resolved value from its cached JSON form."""
        return raw

    def format_value(self, key: str, value: Any) -> str:
        """Render a resolved value for the result report."""
        return str(value)

    def format_absent(self, key: str) -> str:
        """Render the report line for a key with no record."""
        return f"{key}: not found"
