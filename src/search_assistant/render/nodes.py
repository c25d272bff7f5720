"""Element tree used for the widget's view and its display entries."""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Union

logger = logging.getLogger(__name__)

EventHandler = Callable[[], Any]


class Markup(str):
    """A string of markup that is inserted as-is, without escaping."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Markup({str.__repr__(self)})"


Child = Union["Element", Markup, str]


@dataclass(eq=False)
class Element:
    """A node in the widget's element tree.

    Plain ``str`` children are text and get escaped by the serializers;
    ``Markup`` children are emitted verbatim.

    Args:
        tag: Element tag name.
        classes: CSS class names, in insertion order.
        attributes: Additional attributes.
        children: Child nodes.
    """

    tag: str
    classes: list[str] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[Child] = field(default_factory=list)
    parent: Element | None = field(default=None, repr=False)
    _listeners: dict[str, list[EventHandler]] = field(default_factory=dict, repr=False)
    _pending: set[asyncio.Task[Any]] = field(default_factory=set, repr=False)

    def __post_init__(self) -> None:
        for child in self.children:
            if isinstance(child, Element):
                child.parent = self

    def append(self, child: Child) -> Child:
        if isinstance(child, Element):
            if child.parent is not None:
                child.parent.remove(child)
            child.parent = self
        self.children.append(child)
        return child

    def remove(self, child: Child) -> None:
        self.children.remove(child)
        if isinstance(child, Element):
            child.parent = None

    def clear(self) -> None:
        """Detach every child."""
        for child in self.children:
            if isinstance(child, Element):
                child.parent = None
        self.children.clear()

    def has_class(self, name: str) -> bool:
        return name in self.classes

    def toggle_class(self, name: str) -> bool:
        """Flip a class on or off. Returns True if the class is now present."""
        if name in self.classes:
            self.classes.remove(name)
            return False
        self.classes.append(name)
        return True

    def iter(self) -> list[Element]:
        """Return this element and all element descendants, depth first."""
        found = [self]
        for child in self.children:
            if isinstance(child, Element):
                found.extend(child.iter())
        return found

    def find_all(self, class_name: str) -> list[Element]:
        return [el for el in self.iter() if el.has_class(class_name)]

    def add_event_listener(self, event: str, handler: EventHandler) -> None:
        self._listeners.setdefault(event, []).append(handler)

    def remove_event_listener(self, event: str, handler: EventHandler) -> None:
        handlers = self._listeners.get(event, [])
        if handler in handlers:
            handlers.remove(handler)

    def listener_count(self, event: str) -> int:
        return len(self._listeners.get(event, []))

    def dispatch(self, event: str) -> list[asyncio.Task[Any]]:
        """Invoke every handler registered for ``event``.

        Handlers returning awaitables are scheduled on the running event loop
        and the resulting tasks returned, so callers can wait on them. The
        element keeps each task alive until it finishes and logs any failure
        nobody collected.
        """
        tasks: list[asyncio.Task[Any]] = []
        for handler in list(self._listeners.get(event, [])):
            result = handler()
            if inspect.isawaitable(result):
                task = asyncio.ensure_future(result)
                self._pending.add(task)
                task.add_done_callback(self._task_done)
                tasks.append(task)
        return tasks

    @property
    def pending_tasks(self) -> int:
        return len(self._pending)

    def _task_done(self, task: asyncio.Task[Any]) -> None:
        self._pending.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.error(f"Event handler on <{self.tag}> failed. Error: {error!r}")


@dataclass(eq=False)
class TextArea(Element):
    """Free-text input. The value is clipped to ``max_length`` like a browser would."""

    max_length: int | None = None
    _value: str = field(default="", repr=False)

    @property
    def value(self) -> str:
        return self._value

    @value.setter
    def value(self, text: str) -> None:
        if self.max_length is not None:
            text = text[: self.max_length]
        self._value = text


@dataclass(eq=False)
class Checkbox(Element):
    """Boolean toggle control."""

    checked: bool = False
