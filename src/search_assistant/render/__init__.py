"""Rendering of outcomes into display entries and markup."""

from search_assistant.render.entries import format_long_date, render_outcome
from search_assistant.render.html import to_html
from search_assistant.render.nodes import Checkbox, Element, Markup, TextArea
from search_assistant.render.text import entries_to_text, to_text

__all__ = [
    "Checkbox",
    "Element",
    "Markup",
    "TextArea",
    "entries_to_text",
    "format_long_date",
    "render_outcome",
    "to_html",
    "to_text",
]
