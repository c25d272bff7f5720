"""Search Assistant: an embeddable widget suggesting articles for free-text questions."""

from search_assistant.client import HttpQueryService, QueryService
from search_assistant.config import AssistantConfig, install_from_config, load_config
from search_assistant.data import (
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
from search_assistant.render import entries_to_text, render_outcome, to_html, to_text
from search_assistant.sanitize import escape
from search_assistant.session_log import SessionLog
from search_assistant.widget import (
    HostPage,
    InvalidTransitionError,
    MountedWidget,
    ViewOptions,
    WidgetAlreadyMountedError,
    WidgetController,
    WidgetState,
    WidgetStatus,
    install,
    mount,
)

__all__ = [
    # Models
    "Article",
    "DisplayEntry",
    "EmptyQuery",
    "EntryKind",
    "MAX_QUERY_LENGTH",
    "NetworkFailure",
    "NoResults",
    "NoSummary",
    "Outcome",
    "RelatedResult",
    "SearchRequest",
    "SummaryResult",
    # Functions
    "escape",
    "validate_query",
    # Rendering
    "entries_to_text",
    "render_outcome",
    "to_html",
    "to_text",
    # Services
    "HttpQueryService",
    "QueryService",
    # Widget
    "HostPage",
    "InvalidTransitionError",
    "MountedWidget",
    "ViewOptions",
    "WidgetAlreadyMountedError",
    "WidgetController",
    "WidgetState",
    "WidgetStatus",
    "install",
    "mount",
    # Logging
    "SessionLog",
    # Config
    "AssistantConfig",
    "install_from_config",
    "load_config",
]
