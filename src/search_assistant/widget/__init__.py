"""The widget: state machine, view, controller and mounting."""

from search_assistant.widget.controller import WidgetController
from search_assistant.widget.mount import (
    HostPage,
    MountedWidget,
    WidgetAlreadyMountedError,
    install,
    mount,
)
from search_assistant.widget.state import (
    InvalidTransitionError,
    Phase,
    WidgetState,
    WidgetStatus,
)
from search_assistant.widget.view import ViewOptions, WidgetView, build_view

__all__ = [
    "HostPage",
    "InvalidTransitionError",
    "MountedWidget",
    "Phase",
    "ViewOptions",
    "WidgetAlreadyMountedError",
    "WidgetController",
    "WidgetState",
    "WidgetStatus",
    "WidgetView",
    "build_view",
    "install",
    "mount",
]
