"""Prints batch outcomes, one entry per key, followed by summary counts."""

from __future__ import annotations

import sys
from typing import NamedTuple, Sequence, TextIO

from src.interfaces.resolver import IResolver
from src.models.outcome import Absent, Failure, Fresh, Hit, Outcome


class ReportSummary(NamedTuple):
    error_count: int
    cache_hit_count: int


class ResultReporter:
    """Renders outcomes in input order using the resolver's formatting.

    Parameters
    ----------
    resolver:
        Supplies ``format_value`` / ``format_absent`` for its value shape.
    out:
        Destination stream; stdout by default so results can be redirected
        while logs and the progress bar stay on stderr.
    """

    def __init__(self, resolver: IResolver, out: TextIO | None = None) -> None:
        self._resolver = resolver
        self._out = out or sys.stdout

    def _line(self, text: str) -> None:
        print(text, file=self._out)

    def report(self, keys: Sequence[str], outcomes: Sequence[Outcome]) -> ReportSummary:
        """Print every outcome and the summary line; return the counts."""
        if len(keys) != len(outcomes):
            raise ValueError(
                f"outcome count {len(outcomes)} does not match key count {len(keys)}"
            )

        error_count = 0
        cache_hit_count = 0
        for key, outcome in zip(keys, outcomes):
            if isinstance(outcome, Hit):
                cache_hit_count += 1
                self._line(self._resolver.format_value(key, outcome.value))
            elif isinstance(outcome, Fresh):
                self._line(self._resolver.format_value(key, outcome.value))
            elif isinstance(outcome, Absent):
                self._line(self._resolver.format_absent(key))
            elif isinstance(outcome, Failure):
                error_count += 1
                self._line(f"Error: {outcome.reason}, company: {key}")
            else:
                raise TypeError(f"unknown outcome type: {type(outcome).__name__}")

        self._line(f"Done: {error_count} error(s), {cache_hit_count} cache hit(s)")
        return ReportSummary(error_count=error_count, cache_hit_count=cache_hit_count)
