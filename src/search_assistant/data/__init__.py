"""Data models for the search assistant."""

from search_assistant.data.models import (
    MAX_QUERY_LENGTH,
    Article,
    DisplayEntry,
    EmptyQuery,
    EntryKind,
    NetworkFailure,
    NoResults,
    NoSummary,
    Outcome,
    RelatedResult,
    SearchRequest,
    SummaryResult,
    validate_query,
)

__all__ = [
    "MAX_QUERY_LENGTH",
    "Article",
    "DisplayEntry",
    "EmptyQuery",
    "EntryKind",
    "NetworkFailure",
    "NoResults",
    "NoSummary",
    "Outcome",
    "RelatedResult",
    "SearchRequest",
    "SummaryResult",
    "validate_query",
]
