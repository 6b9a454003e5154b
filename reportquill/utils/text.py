"""Text clean-up helpers applied before measuring and wrapping."""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Union

# Standard PDF fonts only carry WinAnsi glyphs, so anything outside
# printable Latin-1 is dropped (newlines survive as explicit breaks).
_UNPRINTABLE = re.compile(r"[^\n\x20-\x7E\u00A0-\u00FF]")
_DROPPED = re.compile(r"[%Ë]")
_SPACES = re.compile(r"[ \t]+")

_LIST_GLYPHS = "•\\-*+○■⦿⚫⚬◉◆◇◈☙➤➢➣➔➝➜➛➙➞❯❱☛☞→"
_LEADING_LIST_MARKER = re.compile(r"^[\s\u00A0]*[" + _LIST_GLYPHS + r"]+[\s\u00A0]*")

DateLike = Union[str, date, datetime]


def sanitize_text(text: str) -> str:
    """Normalise newlines, drop unprintable characters and collapse spaces."""
    if not text:
        return ""
    text = text.replace("\r\n", "\n").replace("\r", "\n").replace("\t", " ")
    text = _DROPPED.sub("", text)
    text = _UNPRINTABLE.sub("", text)
    return _SPACES.sub(" ", text)


def strip_list_marker(text: str) -> str:
    """Remove a leading bullet-like glyph (and the spaces around it)."""
    return _LEADING_LIST_MARKER.sub("", text, count=1)


def _as_date_text(value: DateLike) -> str:
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return str(value).strip()


def format_date_range(start: DateLike, end: DateLike) -> str:
    """
    Build the date line printed under the document title.

    Args:
        start: First day covered by the report
        end: Last day covered by the report

    Returns:
        ``"<start>"`` for a single day, otherwise ``"<start> to <end>"``
    """
    start_text = _as_date_text(start)
    end_text = _as_date_text(end)
    if not end_text or start_text == end_text:
        return start_text
    return f"{start_text} to {end_text}"
