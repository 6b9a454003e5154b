"""
Models for reports, rich text, styled runs and the output page model.
"""

from .rich_text import (
    TagKind,
    InlineStyle,
    TextNode,
    ElementNode,
    RichTextNode,
    RichTextTree,
    iter_text_nodes,
    paragraph,
    heading,
    element,
)
from .run import ListKind, Align, RunStyle, StyledRun, LINE_BREAK_TEXT
from .document import (
    DEFAULT_TITLE_COLOR,
    ImageSize,
    ImageLayout,
    ImageEntry,
    Section,
    Document,
)
from .page import FontSpec, TextLine, ImageBlock, Caption, PageNumber, DrawBlock, Page

__all__ = [
    "TagKind",
    "InlineStyle",
    "TextNode",
    "ElementNode",
    "RichTextNode",
    "RichTextTree",
    "iter_text_nodes",
    "paragraph",
    "heading",
    "element",
    "ListKind",
    "Align",
    "RunStyle",
    "StyledRun",
    "LINE_BREAK_TEXT",
    "DEFAULT_TITLE_COLOR",
    "ImageSize",
    "ImageLayout",
    "ImageEntry",
    "Section",
    "Document",
    "FontSpec",
    "TextLine",
    "ImageBlock",
    "Caption",
    "PageNumber",
    "DrawBlock",
    "Page",
]
