"""
Bullet glyph heuristics for pasted content.

Text pasted from other editors often arrives as plain paragraphs that start
with a bullet character instead of a real list. These helpers recognise the
glyph so the run parser can turn such paragraphs into list items.
"""

from __future__ import annotations

import re
from typing import Tuple

from ..models.rich_text import ElementNode, RichTextNode, TextNode
from ..models.run import ListKind

BULLET_GLYPHS = "•○■"
DASH_GLYPH = "-"

_LEADING_GLYPH = re.compile(r"^\s*([•\-○■])")
_LEADING_GLYPH_RUN = re.compile(r"^\s*[•\-○■]+")


def detect_list_glyph(text: str) -> ListKind:
    """
    Classify the first non-blank character of ``text``.

    Returns:
        ``ListKind.DASH`` for ``-``, ``ListKind.BULLET`` for ``•``/``○``/``■``,
        otherwise ``ListKind.NONE``
    """
    match = _LEADING_GLYPH.match(text or "")
    if not match:
        return ListKind.NONE
    return ListKind.DASH if match.group(1) == DASH_GLYPH else ListKind.BULLET


def strip_list_glyphs(text: str) -> str:
    """Remove leading blanks and the glyph run; text after the glyphs is kept."""
    return _LEADING_GLYPH_RUN.sub("", text or "", count=1)


def normalize_list_glyph(node: ElementNode) -> Tuple[ElementNode, ListKind]:
    """
    Detect a leading glyph in an element's text and strip it.

    The first text leaf holding non-blank text loses its glyph; blank leaves
    before it are emptied. The element's structure (bold spans and so on) is
    preserved.

    Returns:
        Tuple of (possibly rewritten node, detected list kind)
    """
    kind = detect_list_glyph(node.text_content())
    if kind == ListKind.NONE:
        return node, kind
    stripped, _ = _strip_first_leaf(node)
    return stripped, kind


def _strip_first_leaf(node: RichTextNode) -> Tuple[RichTextNode, bool]:
    """Return (new node, done) where done means the glyph was removed."""
    if isinstance(node, TextNode):
        if not node.text.strip():
            return TextNode(""), False
        return TextNode(strip_list_glyphs(node.text)), True

    children = []
    done = False
    for child in node.children:
        if done:
            children.append(child)
            continue
        new_child, done = _strip_first_leaf(child)
        children.append(new_child)
    return ElementNode(node.tag, tuple(children), node.style, node.heading_level), done
