"""Abstract base class for batch progress sinks.

The engine only ever says "a batch of N started", "one more key finished",
and "the batch is over".  How that is rendered (a rich progress bar, a log
line, nothing at all) is the sink's business.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class IProgressSink(ABC):
    """Receives one ``advance()`` per finished key, in completion order."""

    @abstractmethod
    def start(self, total: int) -> None:
        """Begin tracking a batch of *total* keys."""

    @abstractmethod
    def advance(self) -> None:
        """Record that one more key has finished (any outcome kind)."""

    @abstractmethod
    def stop(self) -> None:
        """Finish tracking; called even when the batch fails."""


class NullProgressSink(IProgressSink):
    """A sink that ignores every event; used when progress display is off."""

    def start(self, total: int) -> None:
        return None

    def advance(self) -> None:
        return None

    def stop(self) -> None:
        return None
