"""Attach the widget to a host page and detach it again."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from search_assistant.client.base import QueryService
from search_assistant.render.nodes import Element
from search_assistant.session_log import SessionLog
from search_assistant.widget.controller import WidgetController
from search_assistant.widget.view import ViewOptions, WidgetView, build_view

logger = logging.getLogger(__name__)


class WidgetAlreadyMountedError(ValueError):
    """Raised when a second widget is mounted on the same page."""


@dataclass(eq=False)
class HostPage:
    """The page hosting the widget: a body element and load-time callbacks."""

    body: Element = field(default_factory=lambda: Element("body"))
    loaded: bool = False
    widget: "MountedWidget | None" = None
    _load_listeners: list[Callable[[], None]] = field(default_factory=list, repr=False)

    def on_load(self, callback: Callable[[], None]) -> None:
        """Run ``callback`` once the page loads, or now if it already has."""
        if self.loaded:
            callback()
        else:
            self._load_listeners.append(callback)

    def load(self) -> None:
        """Signal that the page content has loaded."""
        if self.loaded:
            return
        self.loaded = True
        listeners, self._load_listeners = self._load_listeners, []
        for callback in listeners:
            callback()


@dataclass(eq=False)
class MountedWidget:
    """A widget attached to a page."""

    page: HostPage
    view: WidgetView
    controller: WidgetController

    def teardown(self) -> None:
        """Detach event listeners and remove the widget from the page."""
        view = self.view
        view.launcher.remove_event_listener("click", self.controller.toggle)
        view.close_button.remove_event_listener("click", self.controller.toggle)
        view.submit_button.remove_event_listener("click", self.controller.handle_submit_click)
        if view.wrapper.parent is self.page.body:
            self.page.body.remove(view.wrapper)
        if self.page.widget is self:
            self.page.widget = None
        logger.info("Search assistant widget removed from page")


def mount(
    page: HostPage,
    service: QueryService,
    *,
    options: ViewOptions | None = None,
    trust_descriptions: bool = False,
    session_log: SessionLog | None = None,
) -> MountedWidget:
    """Build the widget's view, wire its controls and append it to the page body.

    Raises:
        WidgetAlreadyMountedError: If the page already has a widget.
    """
    if page.widget is not None:
        raise WidgetAlreadyMountedError("A search assistant widget is already mounted on this page.")

    view = build_view(options)
    controller = WidgetController(
        view,
        service,
        trust_descriptions=trust_descriptions,
        session_log=session_log,
    )
    view.launcher.add_event_listener("click", controller.toggle)
    view.close_button.add_event_listener("click", controller.toggle)
    view.submit_button.add_event_listener("click", controller.handle_submit_click)

    page.body.append(view.wrapper)
    widget = MountedWidget(page=page, view=view, controller=controller)
    page.widget = widget
    logger.info("Search assistant widget mounted")
    return widget


def install(
    page: HostPage,
    service: QueryService,
    *,
    options: ViewOptions | None = None,
    trust_descriptions: bool = False,
    session_log: SessionLog | None = None,
) -> None:
    """Mount the widget when the page finishes loading."""

    def _mount() -> None:
        mount(
            page,
            service,
            options=options,
            trust_descriptions=trust_descriptions,
            session_log=session_log,
        )

    page.on_load(_mount)
