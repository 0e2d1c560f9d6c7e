"""Shared pytest fixtures for the cgd test suite."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest

from src.interfaces.progress_sink import IProgressSink
from src.interfaces.resolver import IResolver
from src.models.outcome import Failure, ResolveResult

# ---------------------------------------------------------------------------
# Test doubles
# ---------------------------------------------------------------------------


class StubResolver(IResolver):
    """Call-counting resolver with canned results and optional latency.

    Keys missing from *results* resolve to ``Failure("no match")``.
    """

    cache_filename = "stub-cache.json"

    def __init__(
        self,
        results: dict[str, ResolveResult] | None = None,
        delays: dict[str, float] | None = None,
    ) -> None:
        self._results = results or {}
        self._delays = delays or {}
        self.calls: list[str] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def resolve(self, key: str) -> ResolveResult:
        self.calls.append(key)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self._delays.get(key, 0))
        finally:
            self.in_flight -= 1
        return self._results.get(key, Failure(reason="no match"))

    def get_provider_name(self) -> str:
        return "stub"


class RecordingProgressSink(IProgressSink):
    """Progress sink that records every event it receives."""

    def __init__(self) -> None:
        self.events: list[tuple[str, Any]] = []

    def start(self, total: int) -> None:
        self.events.append(("start", total))

    def advance(self) -> None:
        self.events.append(("advance", None))

    def stop(self) -> None:
        self.events.append(("stop", None))

    @property
    def advances(self) -> int:
        return sum(1 for name, _ in self.events if name == "advance")


def make_response(payload: Any, status_code: int = 200) -> MagicMock:
    """Build a MagicMock standing in for an ``httpx.Response``."""
    response = MagicMock()
    response.status_code = status_code
    response.json = MagicMock(return_value=payload)
    response.raise_for_status = MagicMock()
    return response


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Return an existing, empty data directory."""
    path = tmp_path / "cgd"
    path.mkdir()
    return path


@pytest.fixture
def cache_path(data_dir: Path) -> Path:
    """Return the (not yet created) cache file path inside ``data_dir``."""
    return data_dir / StubResolver.cache_filename


@pytest.fixture
def progress_sink() -> RecordingProgressSink:
    return RecordingProgressSink()
