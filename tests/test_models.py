"""Tests for data models and query validation."""

from dataclasses import FrozenInstanceError
from datetime import date

import pytest

from search_assistant.data import (
    MAX_QUERY_LENGTH,
    Article,
    DisplayEntry,
    EntryKind,
    NetworkFailure,
    RelatedResult,
    SearchRequest,
    validate_query,
)
from search_assistant.render.nodes import Element


class TestValidateQuery:
    """Tests for validate_query."""

    def test_trims_surrounding_whitespace(self) -> None:
        assert validate_query("  how do I wash my hands \n") == "how do I wash my hands"

    def test_keeps_inner_whitespace(self) -> None:
        assert validate_query("flu   shots") == "flu   shots"

    @pytest.mark.parametrize("raw", ["", " ", "\t\n ", "　"])
    def test_blank_input_is_empty(self, raw: str) -> None:
        assert validate_query(raw) == ""

    def test_does_not_truncate_long_input(self) -> None:
        """Should leave the length bound to the input control."""
        raw = "a" * (MAX_QUERY_LENGTH + 50)
        assert validate_query(raw) == raw

    def test_only_trims_long_input(self) -> None:
        raw = " " * 10 + "b" * MAX_QUERY_LENGTH + " "
        assert validate_query(raw) == "b" * MAX_QUERY_LENGTH


class TestModels:
    """Tests for the frozen data models."""

    def test_search_request_is_immutable(self) -> None:
        request = SearchRequest(query="measles", want_summary=True)
        with pytest.raises(FrozenInstanceError):
            request.query = "mumps"  # type: ignore[misc]

    def test_related_result_preserves_order(self) -> None:
        articles = tuple(
            Article(
                title=f"Article {i}",
                url=f"https://example.com/{i}",
                description="",
                published_date=date(2024, 1, i),
            )
            for i in (3, 1, 2)
        )
        result = RelatedResult(articles=articles, correlation_id="abc")
        assert [a.title for a in result.articles] == ["Article 3", "Article 1", "Article 2"]

    def test_network_failure_default_detail(self) -> None:
        failure = NetworkFailure(operation="related")
        assert failure.detail == ""

    def test_display_entries_with_different_content_differ(self) -> None:
        a = DisplayEntry(kind=EntryKind.ARTICLE_CARD, content=Element("div"))
        b = DisplayEntry(kind=EntryKind.ARTICLE_CARD, content=Element("div"))
        assert a != b

    def test_display_entries_with_same_content_are_equal(self) -> None:
        card = Element("div")
        assert DisplayEntry(kind=EntryKind.ARTICLE_CARD, content=card) == DisplayEntry(
            kind=EntryKind.ARTICLE_CARD, content=card
        )

    def test_entry_kind_values(self) -> None:
        assert {k.value for k in EntryKind} == {
            "error-message",
            "article-card",
            "summary-header",
            "summary-body",
        }
