"""Cache providers.

Persistent cache used to skip lookups that earlier runs already answered.
JsonFileCacheStore keeps one JSON file per resolver in the data directory.
It is not safe for concurrent use by several processes; for that, swap in an
adapter implementing ICacheStore without changing the batch engine.
"""

from src.providers.cache.json_file_cache import JsonFileCacheStore

__all__ = ["JsonFileCacheStore"]
