"""
Rich text tree - the pre-layout representation of a section's content.

A tree is made of :class:`TextNode` leaves and :class:`ElementNode` containers.
Element nodes carry a :class:`TagKind` and optional inline style overrides.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional, Tuple, Union


class TagKind(str, Enum):
    """Element kinds understood by the run parser."""

    PARAGRAPH = "paragraph"
    HEADING = "heading"
    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    UNORDERED_LIST = "unordered-list"
    ORDERED_LIST = "ordered-list"
    LIST_ITEM = "list-item"
    LINE_BREAK = "line-break"
    DIV = "div"
    SPAN = "span"


@dataclass(frozen=True, slots=True)
class InlineStyle:
    """Inline overrides found on an element (``style="..."`` in HTML)."""

    color: Optional[str] = None
    font_size: Optional[float] = None
    line_height: Optional[float] = None
    text_align: Optional[str] = None

    def is_empty(self) -> bool:
        return (
            self.color is None
            and self.font_size is None
            and self.line_height is None
            and self.text_align is None
        )


@dataclass(frozen=True, slots=True)
class TextNode:
    """Text leaf."""

    text: str


@dataclass(frozen=True, slots=True)
class ElementNode:
    """Element node with a tag kind and ordered children."""

    tag: TagKind
    children: Tuple["RichTextNode", ...] = field(default_factory=tuple)
    style: InlineStyle = field(default_factory=InlineStyle)
    heading_level: int = 0

    def __post_init__(self):
        # Accept lists from callers, store tuples so trees stay hashable
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))

    def text_content(self) -> str:
        """Concatenated text of every descendant leaf (DOM ``textContent``)."""
        return "".join(leaf.text for leaf in iter_text_nodes(self))


RichTextNode = Union[TextNode, ElementNode]
RichTextTree = RichTextNode


def iter_text_nodes(node: RichTextNode) -> Iterator[TextNode]:
    """Yield text leaves in document order."""
    if isinstance(node, TextNode):
        yield node
        return
    for child in node.children:
        yield from iter_text_nodes(child)


def paragraph(*children: Union[RichTextNode, str], **style) -> ElementNode:
    """Convenience builder: ``paragraph("Intro")``."""
    return _element(TagKind.PARAGRAPH, children, style)


def heading(level: int, *children: Union[RichTextNode, str], **style) -> ElementNode:
    node = _element(TagKind.HEADING, children, style)
    return ElementNode(node.tag, node.children, node.style, heading_level=max(1, min(3, level)))


def element(tag: TagKind, *children: Union[RichTextNode, str], **style) -> ElementNode:
    return _element(tag, children, style)


def _element(tag: TagKind, children, style) -> ElementNode:
    nodes = tuple(TextNode(c) if isinstance(c, str) else c for c in children)
    return ElementNode(tag=tag, children=nodes, style=InlineStyle(**style))
