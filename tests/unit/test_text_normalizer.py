"""Unit tests for text normalization utilities."""

from __future__ import annotations

from src.utils.text_normalizer import name_similarity, split_query_keys


# ======================================================================
# split_query_keys
# ======================================================================


class TestSplitQueryKeys:
    def test_newline_default(self) -> None:
        assert split_query_keys("甲公司\n乙公司\n") == ["甲公司", "乙公司"]

    def test_crlf_lines(self) -> None:
        assert split_query_keys("Acme Co\r\nBogus Inc\r\n") == ["Acme Co", "Bogus Inc"]

    def test_custom_separator_strips_pieces(self) -> None:
        assert split_query_keys("Acme Co, Bogus Inc ,", ",") == ["Acme Co", "Bogus Inc"]

    def test_blank_lines_dropped(self) -> None:
        assert split_query_keys("\n\na\n\n  \nb\n") == ["a", "b"]

    def test_duplicates_and_order_preserved(self) -> None:
        assert split_query_keys("b\na\nb") == ["b", "a", "b"]

    def test_empty_separator_falls_back_to_newline(self) -> None:
        assert split_query_keys("a\nb", "") == ["a", "b"]

    def test_whitespace_only_input(self) -> None:
        assert split_query_keys("   \n  ") == []


# ======================================================================
# name_similarity
# ======================================================================


class TestNameSimilarity:
    def test_identical(self) -> None:
        assert name_similarity("平安银行股份有限公司", "平安银行股份有限公司") == 1.0

    def test_partial(self) -> None:
        score = name_similarity("平安银行", "平安银行股份有限公司")
        assert 0.0 < score < 1.0

    def test_unrelated(self) -> None:
        assert name_similarity("abc", "xyz") == 0.0
