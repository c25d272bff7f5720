"""Factory functions to create components from configuration."""

from pathlib import Path

import httpx

from search_assistant.client.http import HttpQueryService
from search_assistant.config.models import AssistantConfig, LoggingConfig, ServiceConfig
from search_assistant.session_log import SessionLog
from search_assistant.widget.mount import HostPage, install


def create_service(
    config: ServiceConfig,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> HttpQueryService:
    """Create the HTTP query service from config."""
    return HttpQueryService(
        base_url=config.base_url,
        timeout=config.timeout_seconds,
        transport=transport,
    )


def create_session_log(
    config: LoggingConfig,
    *,
    log_override: bool | None = None,
    log_dir_override: str | None = None,
) -> SessionLog | None:
    """Create a SessionLog, or None when logging is disabled.

    Args:
        config: Logging configuration.
        log_override: Override the config's enabled setting.
        log_dir_override: Override the config's log_dir setting.
    """
    enabled = log_override if log_override is not None else config.enabled
    if not enabled:
        return None
    log_dir = Path(log_dir_override if log_dir_override is not None else config.log_dir)
    return SessionLog(log_dir=log_dir, enabled=True)


def install_from_config(
    page: HostPage,
    config: AssistantConfig,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> tuple[HttpQueryService, SessionLog | None]:
    """Arrange for a configured widget to mount when ``page`` loads.

    Returns:
        Tuple of (service, session_log). session_log is None if logging is disabled.
    """
    service = create_service(config.service, transport=transport)
    session_log = create_session_log(config.logging)
    install(
        page,
        service,
        options=config.widget.to_view_options(),
        trust_descriptions=config.widget.trust_description_markup,
        session_log=session_log,
    )
    return (service, session_log)
