"""Core data models for the search assistant widget."""

from dataclasses import dataclass
from datetime import date
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from search_assistant.render.nodes import Element

MAX_QUERY_LENGTH = 300


@dataclass(frozen=True)
class Article:
    """An article suggested by the backend for a query."""

    title: str
    url: str
    description: str
    published_date: date


@dataclass(frozen=True)
class SearchRequest:
    """A single submit action: the query text and whether a summary was asked for."""

    query: str
    want_summary: bool = False


@dataclass(frozen=True)
class RelatedResult:
    """Articles related to a query, in backend relevance order.

    ``correlation_id`` links this response to a later summary request. The
    backend only returns one when it kept the query around for answering.
    """

    articles: tuple[Article, ...]
    correlation_id: str | None = None


@dataclass(frozen=True)
class SummaryResult:
    """Computer-generated summary text. Untrusted; escape before display."""

    text: str


@dataclass(frozen=True)
class EmptyQuery:
    """The user submitted nothing but whitespace."""


@dataclass(frozen=True)
class NoResults:
    """The backend answered, but found no articles."""


@dataclass(frozen=True)
class NoSummary:
    """The backend could not produce a summary for the query."""


@dataclass(frozen=True)
class NetworkFailure:
    """A request failed in transport or on the server.

    Args:
        operation: Which request failed ("related" or "summary").
        detail: Diagnostic detail for operators. Never shown to users.
    """

    operation: str
    detail: str = ""


Outcome = RelatedResult | SummaryResult | EmptyQuery | NoResults | NoSummary | NetworkFailure


class EntryKind(StrEnum):
    """Kinds of renderable units in the results area."""

    ERROR_MESSAGE = "error-message"
    ARTICLE_CARD = "article-card"
    SUMMARY_HEADER = "summary-header"
    SUMMARY_BODY = "summary-body"


@dataclass(frozen=True)
class DisplayEntry:
    """One renderable unit of the results area."""

    kind: EntryKind
    content: "Element"


def validate_query(raw: str) -> str:
    """Trim surrounding whitespace from user input. Nothing else is changed.

    The input control enforces ``MAX_QUERY_LENGTH``. An empty return value
    means the submission is an ``EmptyQuery``.
    """
    return raw.strip()
