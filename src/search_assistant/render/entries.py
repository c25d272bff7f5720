"""Map query outcomes to display entries."""

import logging
from datetime import date

from search_assistant.data import (
    Article,
    DisplayEntry,
    EmptyQuery,
    EntryKind,
    NetworkFailure,
    NoResults,
    NoSummary,
    Outcome,
    RelatedResult,
    SummaryResult,
)
from search_assistant.render.nodes import Element, Markup
from search_assistant.sanitize import escape

logger = logging.getLogger(__name__)

RESULT_CLASS = "chat-widget-result"

EMPTY_QUERY_MESSAGE = "Please type a question into the text box above."
NO_RESULTS_MESSAGE = "No articles found. Please reword your question."
NO_SUMMARY_MESSAGE = "No computer-generated summary found. Please reword your question."
NETWORK_FAILURE_MESSAGE = (
    "Our team is investigating some issues with the search assistant. Please try again later."
)
SUMMARY_TITLE = "Computer-generated summary:"
SUMMARY_DISCLAIMER = (
    "A computer attempted to answer your question with the most relevant article found. "
    "This content is not human-verified, so double-check specific claims, especially "
    "numerical statistics or personal advice."
)

# Fixed en-US month names so output doesn't depend on the process locale.
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def format_long_date(day: date) -> str:
    """Format a date as ``Month Day, Year``, e.g. ``March 4, 2024``."""
    return f"{MONTH_NAMES[day.month - 1]} {day.day}, {day.year}"


def render_outcome(outcome: Outcome, *, trust_descriptions: bool = False) -> list[DisplayEntry]:
    """Convert an outcome into the ordered entries that display it.

    Args:
        outcome: The outcome of one request.
        trust_descriptions: Insert article descriptions as markup unchanged.
            When False, descriptions are escaped like any untrusted text.

    Returns:
        Display entries in display order.
    """
    if isinstance(outcome, EmptyQuery):
        return [_error_entry(EMPTY_QUERY_MESSAGE)]
    if isinstance(outcome, NoResults):
        return [_error_entry(NO_RESULTS_MESSAGE)]
    if isinstance(outcome, NoSummary):
        return [_error_entry(NO_SUMMARY_MESSAGE)]
    if isinstance(outcome, NetworkFailure):
        logger.error(
            f"Search assistant {outcome.operation} request failed. Detail: {outcome.detail}"
        )
        return [_error_entry(NETWORK_FAILURE_MESSAGE)]
    if isinstance(outcome, RelatedResult):
        return [
            _article_entry(article, trust_description=trust_descriptions)
            for article in outcome.articles
        ]
    if isinstance(outcome, SummaryResult):
        return _summary_entries(outcome)
    msg = f"Unknown outcome type: {type(outcome)}"
    raise ValueError(msg)


def _error_entry(message: str) -> DisplayEntry:
    node = Element("p", classes=[RESULT_CLASS, "chat-widget-error"])
    node.append(message)
    return DisplayEntry(kind=EntryKind.ERROR_MESSAGE, content=node)


def _article_entry(article: Article, *, trust_description: bool) -> DisplayEntry:
    card = Element("div", classes=[RESULT_CLASS, "chat-widget-article"])

    link = Element(
        "a",
        attributes={
            "href": article.url,
            "target": "_blank",
            "rel": "noopener noreferrer",
        },
    )
    link.append(Element("b", children=[article.title]))
    card.append(link)

    published = Element("p", classes=["chat-widget-date"])
    published.append(f"({format_long_date(article.published_date)})")
    card.append(published)

    text = article.description if trust_description else escape(article.description)
    card.append(Element("p", classes=["chat-widget-description"], children=[Markup(text)]))

    return DisplayEntry(kind=EntryKind.ARTICLE_CARD, content=card)


def _summary_entries(summary: SummaryResult) -> list[DisplayEntry]:
    header = Element("div", classes=[RESULT_CLASS, "chat-widget-summary-header"])
    header.append(Element("h4", children=[SUMMARY_TITLE]))
    header.append(Element("p", children=[SUMMARY_DISCLAIMER]))

    body = Element("p", classes=[RESULT_CLASS, "chat-widget-summary"])
    body.append(Markup(escape(summary.text)))

    return [
        DisplayEntry(kind=EntryKind.SUMMARY_HEADER, content=header),
        DisplayEntry(kind=EntryKind.SUMMARY_BODY, content=body),
    ]
