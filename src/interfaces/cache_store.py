"""Abstract base class for the persistent name→result cache.

The cache is a pure performance optimization, never a source of truth:
implementations must treat a missing or unreadable backing store as an
empty cache, and only genuine storage faults (permissions, disk errors)
as fatal.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class ICacheStore(ABC):
    """Contract for a flat key→value cache persisted as a single unit.

    The in-memory mapping is owned by the caller: :meth:`load` hands it out
    once per batch and :meth:`put_and_persist` mutates it and rewrites the
    backing store after every successful resolution.
    """

    @abstractmethod
    def load(self) -> dict[str, Any]:
        """Read the backing store.

        Returns
        -------
        dict[str, Any]
            The cached mapping; empty when the store is missing or its
            content cannot be parsed.

        Raises
        ------
        src.utils.errors.CacheStoreError
            On any other I/O failure.
        """

    def get(self, mapping: dict[str, Any], key: str) -> Any | None:
        """Return the cached value for *key*, or ``None``."""
        return mapping.get(key)

    @abstractmethod
    def put_and_persist(self, mapping: dict[str, Any], key: str, value: Any) -> None:
        """Store *value* under *key* and immediately persist the whole mapping.

        Raises
        ------
        src.utils.errors.CacheStoreError
            If the backing store cannot be written.
        """
