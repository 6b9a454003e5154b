"""
HTML parser - builds a rich text tree from contenteditable HTML.

Handles:
- paragraphs, divs and headings
- bold, italic and underline formatting
- nested ordered/unordered lists
- explicit line breaks
- inline ``style`` overrides (color, font-size, line-height, text-align)
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from html.parser import HTMLParser
from typing import Dict, List, Optional

from ..models.rich_text import ElementNode, InlineStyle, RichTextNode, TagKind, TextNode

logger = logging.getLogger(__name__)

_CONDITIONAL_COMMENT = re.compile(r"<!--\[if[\s\S]*?<!\[endif\]-->")
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_LEADING_FLOAT = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+))")

TAG_KINDS: Dict[str, TagKind] = {
    "p": TagKind.PARAGRAPH,
    "div": TagKind.DIV,
    "b": TagKind.BOLD,
    "strong": TagKind.BOLD,
    "i": TagKind.ITALIC,
    "em": TagKind.ITALIC,
    "u": TagKind.UNDERLINE,
    "ul": TagKind.UNORDERED_LIST,
    "ol": TagKind.ORDERED_LIST,
    "li": TagKind.LIST_ITEM,
    "br": TagKind.LINE_BREAK,
    "span": TagKind.SPAN,
    "font": TagKind.SPAN,
}

HEADING_TAGS = {"h1": 1, "h2": 2, "h3": 3, "h4": 3, "h5": 3, "h6": 3}
VOID_TAGS = {"br", "img", "hr", "meta", "link", "input", "wbr", "col", "area", "source"}
SKIPPED_TAGS = {"script", "style", "head", "title", "xml"}


def clean_pasted_html(raw_html: str) -> str:
    """
    Pre-clean raw HTML before parsing.

    Removes MS Word conditional comments; multiple ``<br>`` tags and
    newlines are preserved so vertical spacing survives.
    """
    if not raw_html:
        return ""
    return _CONDITIONAL_COMMENT.sub("", raw_html)


def parse_font_size(value: Optional[str]) -> Optional[float]:
    """Integer prefix of a CSS size (``"14px"`` -> 14); None when absent."""
    if not value:
        return None
    match = _LEADING_INT.match(value)
    if not match:
        return None
    size = int(match.group(1))
    return float(size) if size > 0 else None


def parse_line_height(value: Optional[str]) -> Optional[float]:
    """Float prefix of a CSS line-height (``"1.5"`` -> 1.5); None when absent."""
    if not value:
        return None
    match = _LEADING_FLOAT.match(value)
    if not match:
        return None
    height = float(match.group(1))
    return height if height > 0 else None


def parse_style_attribute(style_str: Optional[str]) -> InlineStyle:
    """Parse ``style="color: red; font-size: 12px"`` into inline overrides."""
    if not style_str:
        return InlineStyle()

    values: Dict[str, str] = {}
    for declaration in style_str.split(";"):
        declaration = declaration.strip()
        if ":" not in declaration:
            continue
        prop, value = declaration.split(":", 1)
        values[prop.strip().lower()] = value.strip()

    return InlineStyle(
        color=values.get("color") or None,
        font_size=parse_font_size(values.get("font-size")),
        line_height=parse_line_height(values.get("line-height")),
        text_align=values.get("text-align") or None,
    )


@dataclass
class _OpenElement:
    """Element under construction on the parser stack."""

    tag_name: str
    kind: Optional[TagKind]
    style: InlineStyle = field(default_factory=InlineStyle)
    heading_level: int = 0
    children: List[RichTextNode] = field(default_factory=list)


class RichTextHTMLParser(HTMLParser):
    """Parser HTML that builds :class:`ElementNode` trees from contenteditable markup."""

    def __init__(self):
        super().__init__(convert_charrefs=True)
        self.stack: List[_OpenElement] = [_OpenElement("div", TagKind.DIV)]
        self.skip_depth = 0

    def handle_starttag(self, tag: str, attrs: list) -> None:
        tag_lower = tag.lower()
        if tag_lower in SKIPPED_TAGS:
            self.skip_depth += 1
            return
        if self.skip_depth:
            return

        attributes = {name.lower(): value for name, value in attrs}
        style = parse_style_attribute(attributes.get("style"))
        if style.color is None and attributes.get("color"):
            style = InlineStyle(attributes["color"], style.font_size, style.line_height, style.text_align)
        if style.text_align is None and attributes.get("align"):
            style = InlineStyle(style.color, style.font_size, style.line_height, attributes["align"])

        heading_level = HEADING_TAGS.get(tag_lower, 0)
        kind = TagKind.HEADING if heading_level else TAG_KINDS.get(tag_lower)
        element = _OpenElement(tag_lower, kind, style, heading_level)

        if tag_lower in VOID_TAGS:
            self._append(self._close(element))
            return
        self.stack.append(element)

    def handle_startendtag(self, tag: str, attrs: list) -> None:
        self.handle_starttag(tag, attrs)
        if tag.lower() not in VOID_TAGS and not self.skip_depth:
            self.handle_endtag(tag)

    def handle_endtag(self, tag: str) -> None:
        tag_lower = tag.lower()
        if tag_lower in SKIPPED_TAGS:
            self.skip_depth = max(0, self.skip_depth - 1)
            return
        if self.skip_depth or tag_lower in VOID_TAGS:
            return

        # Stray end tags are ignored; unclosed children are closed implicitly
        if not any(open_el.tag_name == tag_lower for open_el in self.stack[1:]):
            logger.debug(f"Ignoring unmatched end tag </{tag_lower}>")
            return
        while len(self.stack) > 1:
            element = self.stack.pop()
            self._append(self._close(element))
            if element.tag_name == tag_lower:
                break

    def handle_data(self, data: str) -> None:
        if self.skip_depth or not data:
            return
        self.stack[-1].children.append(TextNode(data))

    def _append(self, nodes: List[RichTextNode]) -> None:
        self.stack[-1].children.extend(nodes)

    @staticmethod
    def _close(element: _OpenElement) -> List[RichTextNode]:
        """Turn an open element into nodes; unknown tags splice their children."""
        if element.kind is None:
            return list(element.children)
        return [
            ElementNode(
                tag=element.kind,
                children=tuple(element.children),
                style=element.style,
                heading_level=element.heading_level,
            )
        ]

    def result(self) -> ElementNode:
        self.close()
        while len(self.stack) > 1:
            element = self.stack.pop()
            self._append(self._close(element))
        root = self.stack[0]
        return ElementNode(TagKind.DIV, tuple(root.children))


def parse_html(html: str) -> ElementNode:
    """
    Parse contenteditable HTML into a rich text tree.

    Args:
        html: Section content as stored by the editor

    Returns:
        Root ``div`` element holding the parsed content
    """
    parser = RichTextHTMLParser()
    parser.feed(clean_pasted_html(html or ""))
    return parser.result()
