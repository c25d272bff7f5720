"""Configuration module for the search assistant."""

from search_assistant.config.factory import create_service, create_session_log, install_from_config
from search_assistant.config.loader import get_default_config_path, load_config
from search_assistant.config.models import (
    AssistantConfig,
    LoggingConfig,
    ServiceConfig,
    WidgetConfig,
)

__all__ = [
    "AssistantConfig",
    "LoggingConfig",
    "ServiceConfig",
    "WidgetConfig",
    "create_service",
    "create_session_log",
    "get_default_config_path",
    "install_from_config",
    "load_config",
]
