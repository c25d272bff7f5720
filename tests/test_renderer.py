"""Tests for rendering outcomes into display entries."""

import logging
import re
from datetime import date

import pytest

from search_assistant.data import (
    Article,
    EmptyQuery,
    EntryKind,
    NetworkFailure,
    NoResults,
    NoSummary,
    RelatedResult,
    SummaryResult,
)
from search_assistant.render import entries_to_text, format_long_date, render_outcome, to_html
from search_assistant.render.entries import (
    EMPTY_QUERY_MESSAGE,
    NETWORK_FAILURE_MESSAGE,
    NO_RESULTS_MESSAGE,
    NO_SUMMARY_MESSAGE,
    RESULT_CLASS,
)


def _article(i: int, description: str = "Plain description.") -> Article:
    return Article(
        title=f"Article {i}",
        url=f"https://health.example.ca/articles/{i}",
        description=description,
        published_date=date(2024, 1, i),
    )


@pytest.mark.parametrize(
    ("day", "expected"),
    [
        (date(2024, 3, 4), "March 4, 2024"),
        (date(1999, 12, 31), "December 31, 1999"),
        (date(2023, 1, 1), "January 1, 2023"),
    ],
)
def test_format_long_date(day: date, expected: str) -> None:
    assert format_long_date(day) == expected


@pytest.mark.parametrize(
    ("outcome", "message"),
    [
        (EmptyQuery(), EMPTY_QUERY_MESSAGE),
        (NoResults(), NO_RESULTS_MESSAGE),
        (NoSummary(), NO_SUMMARY_MESSAGE),
        (NetworkFailure(operation="related", detail="HTTP 500"), NETWORK_FAILURE_MESSAGE),
    ],
)
def test_single_error_entry(outcome: object, message: str) -> None:
    entries = render_outcome(outcome)  # type: ignore[arg-type]

    assert len(entries) == 1
    assert entries[0].kind is EntryKind.ERROR_MESSAGE
    assert to_html(entries[0].content) == (
        f'<p class="{RESULT_CLASS} chat-widget-error">{message}</p>'
    )


def test_network_failure_message_is_the_same_for_both_operations() -> None:
    related = render_outcome(NetworkFailure(operation="related", detail="HTTP 500"))
    summary = render_outcome(NetworkFailure(operation="summary", detail="ConnectError()"))

    assert to_html(related[0].content) == to_html(summary[0].content)


def test_network_failure_is_logged_not_shown(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.ERROR, logger="search_assistant.render.entries"):
        entries = render_outcome(NetworkFailure(operation="summary", detail="HTTP 502: bad gateway"))

    assert "HTTP 502" in caplog.text
    assert "summary" in caplog.text
    assert "502" not in to_html(entries[0].content)


class TestArticleCards:
    """Tests for rendering RelatedResult."""

    def test_one_card_per_article_in_order(self) -> None:
        result = RelatedResult(articles=tuple(_article(i) for i in (5, 2, 9)), correlation_id="x")

        entries = render_outcome(result)

        assert [e.kind for e in entries] == [EntryKind.ARTICLE_CARD] * 3
        titles = [re.search(r"<b>(.*?)</b>", to_html(e.content)).group(1) for e in entries]  # type: ignore[union-attr]
        assert titles == ["Article 5", "Article 2", "Article 9"]

    def test_card_markup(self) -> None:
        entries = render_outcome(RelatedResult(articles=(_article(4),)))

        assert to_html(entries[0].content) == (
            f'<div class="{RESULT_CLASS} chat-widget-article">'
            '<a href="https://health.example.ca/articles/4" target="_blank" '
            'rel="noopener noreferrer"><b>Article 4</b></a>'
            '<p class="chat-widget-date">(January 4, 2024)</p>'
            '<p class="chat-widget-description">Plain description.</p>'
            "</div>"
        )

    def test_description_is_escaped_by_default(self) -> None:
        article = _article(1, description="<img src=x onerror=alert(1)>")

        html = to_html(render_outcome(RelatedResult(articles=(article,)))[0].content)

        assert "<img" not in html
        assert "&lt;img src=x onerror=alert(1)&gt;" in html

    def test_trusted_description_is_inserted_as_markup(self) -> None:
        article = _article(1, description="Read the <em>latest</em> data.")

        entries = render_outcome(RelatedResult(articles=(article,)), trust_descriptions=True)

        assert "Read the <em>latest</em> data." in to_html(entries[0].content)

    def test_title_is_always_text(self) -> None:
        article = Article(
            title="A & B <study>",
            url="https://health.example.ca/a?b=1&c=2",
            description="",
            published_date=date(2024, 1, 1),
        )

        html = to_html(render_outcome(RelatedResult(articles=(article,)), trust_descriptions=True)[0].content)

        assert "<b>A &amp; B &lt;study&gt;</b>" in html
        assert 'href="https://health.example.ca/a?b=1&amp;c=2"' in html


class TestSummary:
    """Tests for rendering SummaryResult."""

    def test_header_then_body(self) -> None:
        entries = render_outcome(SummaryResult(text="Wash often."))

        assert [e.kind for e in entries] == [EntryKind.SUMMARY_HEADER, EntryKind.SUMMARY_BODY]
        assert "Computer-generated summary:" in to_html(entries[0].content)
        assert "not human-verified" in to_html(entries[0].content)

    def test_body_is_sanitized(self) -> None:
        text = '<script>steal("cookies")</script> & more\nsecond line\'s'

        body = render_outcome(SummaryResult(text=text))[1]
        html = to_html(body.content)

        inner = html.removeprefix(f'<p class="{RESULT_CLASS} chat-widget-summary">')
        inner = inner.removesuffix("</p>")
        assert inner.count("<br>") == 1
        stripped = re.sub(r"&(amp|lt|gt|quot|#x27);", "", inner.replace("<br>", ""))
        assert not re.search(r"[<>&\"']", stripped)


def test_entries_to_text() -> None:
    entries = render_outcome(RelatedResult(articles=(_article(1),)))
    entries += render_outcome(SummaryResult(text="Line one\nLine two & more"))
    entries += render_outcome(NoSummary())

    text = entries_to_text(entries)

    assert "Article 1 <https://health.example.ca/articles/1>" in text
    assert "(January 1, 2024)" in text
    assert "Line one\nLine two & more" in text
    assert f"! {NO_SUMMARY_MESSAGE}" in text
