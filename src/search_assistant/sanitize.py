"""Escaping of untrusted text for display."""

import html

LINE_BREAK = "<br>"


def escape(text: str) -> str:
    """Escape text for insertion into markup.

    Maps ``&``, ``<``, ``>``, ``"`` and ``'`` to entities and every newline to
    a ``<br>`` marker. Input is assumed raw: escaping an already escaped
    string escapes it again, so call this exactly once per piece of text.
    """
    escaped = html.escape(text, quote=True)
    return escaped.replace("\r\n", "\n").replace("\n", LINE_BREAK)
