"""Serialize an element tree to HTML markup."""

import html

from search_assistant.render.nodes import Child, Element, Markup

VOID_TAGS = frozenset({"br", "hr", "img", "input", "meta", "link"})


def to_html(node: Child) -> str:
    """Render a node and its descendants as HTML.

    Text children and attribute values are escaped; ``Markup`` is emitted verbatim.
    """
    if isinstance(node, Markup):
        return str(node)
    if isinstance(node, str):
        return html.escape(node, quote=False)
    return _element_to_html(node)


def _element_to_html(element: Element) -> str:
    attrs = _format_attributes(element)
    open_tag = f"<{element.tag}{attrs}>"
    if element.tag in VOID_TAGS:
        return open_tag
    inner = "".join(to_html(child) for child in element.children)
    return f"{open_tag}{inner}</{element.tag}>"


def _format_attributes(element: Element) -> str:
    pairs: list[tuple[str, str]] = []
    if element.classes:
        pairs.append(("class", " ".join(element.classes)))
    pairs.extend(element.attributes.items())
    return "".join(f' {name}="{html.escape(value, quote=True)}"' for name, value in pairs)
