"""Unit tests for ResultReporter."""

from __future__ import annotations

import io
from unittest.mock import AsyncMock

import pytest

from src.models.company import ListedCompany
from src.models.outcome import Absent, Failure, Fresh, Hit
from src.providers.resolver.cninfo_provider import CninfoResolver
from src.providers.resolver.credit_china_provider import CreditChinaResolver
from src.services.result_reporter import ReportSummary, ResultReporter


def _report(resolver, keys, outcomes) -> tuple[ReportSummary, list[str]]:
    out = io.StringIO()
    summary = ResultReporter(resolver, out=out).report(keys, outcomes)
    return summary, out.getvalue().splitlines()


class TestResultReporter:
    def test_counts_errors_and_cache_hits(self) -> None:
        resolver = CreditChinaResolver(http_client=AsyncMock())
        summary, lines = _report(
            resolver,
            ["a", "b", "c", "d"],
            [Hit(value="91A"), Fresh(value="91B"), Failure(reason="no match"), Hit(value="91D")],
        )

        assert summary == ReportSummary(error_count=1, cache_hit_count=2)
        assert summary == (1, 2)
        assert lines == [
            "91A",
            "91B",
            "Error: no match, company: c",
            "91D",
            "Done: 1 error(s), 2 cache hit(s)",
        ]

    def test_absent_is_not_an_error(self) -> None:
        resolver = CninfoResolver(http_client=AsyncMock())
        summary, lines = _report(resolver, ["Nobody Ltd"], [Absent()])

        assert summary == ReportSummary(error_count=0, cache_hit_count=0)
        assert lines[:2] == ["Nobody Ltd:", "Not a listed company"]

    def test_listed_company_block(self) -> None:
        resolver = CninfoResolver(http_client=AsyncMock())
        company = ListedCompany(code="000001", shareholders=["Holder One", "Holder Two"])
        _, lines = _report(resolver, ["Acme"], [Fresh(value=company)])

        assert lines[:5] == [
            "Acme:",
            "Stock code: 000001",
            "Top shareholders:",
            "  Holder One",
            "  Holder Two",
        ]

    def test_length_mismatch_rejected(self) -> None:
        resolver = CreditChinaResolver(http_client=AsyncMock())
        with pytest.raises(ValueError):
            ResultReporter(resolver, out=io.StringIO()).report(["a", "b"], [Fresh(value="1")])

    def test_empty_batch_prints_summary_only(self) -> None:
        resolver = CreditChinaResolver(http_client=AsyncMock())
        summary, lines = _report(resolver, [], [])

        assert summary == (0, 0)
        assert lines == ["Done: 0 error(s), 0 cache hit(s)"]
