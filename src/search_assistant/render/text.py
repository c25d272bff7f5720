"""Plain-text rendering of display entries, for terminals and logs."""

import html
import re

from search_assistant.data import DisplayEntry, EntryKind
from search_assistant.render.nodes import Child, Element, Markup

_BREAK_RE = re.compile(r"<br\s*/?>", re.IGNORECASE)
_TAG_RE = re.compile(r"<[^>]+>")
BLOCK_TAGS = frozenset({"p", "div", "h3", "h4"})


def to_text(node: Child) -> str:
    """Flatten a node to text. Markup loses its tags; line breaks become newlines."""
    if isinstance(node, Markup):
        return html.unescape(_TAG_RE.sub("", _BREAK_RE.sub("\n", node)))
    if isinstance(node, str):
        return node
    return _element_to_text(node)


def _element_to_text(element: Element) -> str:
    if element.tag == "br":
        return "\n"
    parts: list[str] = []
    for child in element.children:
        text = to_text(child)
        if isinstance(child, Element) and child.tag in BLOCK_TAGS and parts:
            parts.append("\n")
        parts.append(text)
    text = "".join(parts)
    if element.tag == "a" and "href" in element.attributes:
        text = f"{text} <{element.attributes['href']}>"
    return text


def entries_to_text(entries: list[DisplayEntry]) -> str:
    """Render a result set as text, one blank line between entries."""
    blocks = []
    for entry in entries:
        text = to_text(entry.content).strip()
        if entry.kind is EntryKind.ERROR_MESSAGE:
            text = f"! {text}"
        blocks.append(text)
    return "\n\n".join(blocks)
