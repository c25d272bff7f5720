"""Tests for the element tree and its serializers."""

import asyncio
import gc
import logging
from typing import Any

import pytest

from search_assistant.render import Checkbox, Element, Markup, TextArea, to_html, to_text


def test_append_sets_parent_and_moves_between_parents() -> None:
    first = Element("div")
    second = Element("div")
    child = Element("p")

    first.append(child)
    second.append(child)

    assert child.parent is second
    assert first.children == []
    assert second.children == [child]


def test_constructor_children_get_parent() -> None:
    child = Element("b")
    parent = Element("a", children=[child, "text"])
    assert child.parent is parent


def test_clear_detaches_children() -> None:
    child = Element("p")
    parent = Element("div", children=[child])

    parent.clear()

    assert parent.children == []
    assert child.parent is None


def test_toggle_class() -> None:
    el = Element("div", classes=["a"])
    assert el.toggle_class("b") is True
    assert el.toggle_class("a") is False
    assert el.classes == ["b"]


def test_find_all_by_class() -> None:
    hit = Element("p", classes=["x"])
    root = Element("div", children=[Element("span", children=[hit]), Element("p")])
    assert root.find_all("x") == [hit]


def test_to_html_escapes_text_but_not_markup() -> None:
    el = Element("p", children=["1 < 2", Markup("<br>"), "&"])
    assert to_html(el) == "<p>1 &lt; 2<br>&amp;</p>"


def test_to_html_void_elements_and_attributes() -> None:
    el = Element("img", attributes={"src": "./icon.svg", "alt": 'say "hi"'})
    assert to_html(el) == '<img src="./icon.svg" alt="say &quot;hi&quot;">'


def test_to_text_converts_markup() -> None:
    el = Element("p", children=[Markup("one<br>two &amp; <b>three</b>")])
    assert to_text(el) == "one\ntwo & three"


def test_textarea_clips_to_max_length() -> None:
    box = TextArea("textarea", max_length=5)
    box.value = "abcdefgh"
    assert box.value == "abcde"


def test_checkbox_defaults_unchecked() -> None:
    assert Checkbox("input").checked is False


def test_dispatch_runs_sync_handlers() -> None:
    calls: list[str] = []
    el = Element("button")
    el.add_event_listener("click", lambda: calls.append("clicked"))

    tasks = el.dispatch("click")

    assert tasks == []
    assert calls == ["clicked"]


async def test_dispatch_schedules_async_handlers() -> None:
    calls: list[str] = []

    async def handler() -> str:
        await asyncio.sleep(0)
        calls.append("done")
        return "result"

    el = Element("button")
    el.add_event_listener("click", handler)

    tasks = el.dispatch("click")
    results = await asyncio.gather(*tasks)

    assert results == ["result"]
    assert calls == ["done"]


async def test_dispatch_tracks_unawaited_tasks_and_logs_failures(
    caplog: pytest.LogCaptureFixture,
) -> None:
    reported: list[dict[str, Any]] = []
    loop = asyncio.get_running_loop()
    loop.set_exception_handler(lambda _loop, context: reported.append(context))

    async def handler() -> None:
        await asyncio.sleep(0)
        raise RuntimeError("handler broke")

    el = Element("button")
    el.add_event_listener("click", handler)

    with caplog.at_level(logging.ERROR, logger="search_assistant.render.nodes"):
        el.dispatch("click")
        assert el.pending_tasks == 1
        for _ in range(5):
            await asyncio.sleep(0)
        gc.collect()

    assert el.pending_tasks == 0
    assert "handler broke" in caplog.text
    assert reported == []
    loop.set_exception_handler(None)


def test_remove_event_listener() -> None:
    calls: list[int] = []

    def handler() -> None:
        calls.append(1)

    el = Element("button")
    el.add_event_listener("click", handler)
    el.remove_event_listener("click", handler)
    el.dispatch("click")

    assert calls == []
    assert el.listener_count("click") == 0
