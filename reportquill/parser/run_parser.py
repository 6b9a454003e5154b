"""
Style run parser - flattens a rich text tree into styled runs.

The tree is walked depth first. The current style is an immutable
:class:`RunStyle` passed down each call; descendants override what they
inherit. List nesting increases on entering an ordered or unordered list.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import List, Optional

from ..exceptions import ParsingError
from ..models.rich_text import ElementNode, InlineStyle, RichTextNode, TagKind, TextNode
from ..models.run import LINE_BREAK_TEXT, Align, ListKind, RunStyle, StyledRun
from ..utils.text import sanitize_text, strip_list_marker
from .bullets import normalize_list_glyph

logger = logging.getLogger(__name__)


class StyleRunParser:
    """Converts a :data:`RichTextTree` into an ordered list of runs."""

    def parse(self, tree: Optional[RichTextNode]) -> List[StyledRun]:
        """
        Flatten ``tree`` into runs.

        A root ``div`` is a container: its children are walked in turn and
        it never becomes a list item itself.

        Args:
            tree: Root node (usually a ``div`` holding the section content)

        Returns:
            Runs in document order; ``"\\n"`` runs mark explicit breaks

        Raises:
            ParsingError: If ``tree`` is not a rich text node
        """
        runs: List[StyledRun] = []
        if tree is None:
            return runs
        if isinstance(tree, ElementNode) and tree.tag == TagKind.DIV:
            style = _apply_inline_style(RunStyle(), tree.style)
            for child in tree.children:
                self._visit(child, style, 0, runs)
        else:
            self._visit(tree, RunStyle(), 0, runs)
        logger.debug(f"Parsed {len(runs)} runs")
        return runs

    def _visit(self, node: RichTextNode, style: RunStyle, nest_level: int, out: List[StyledRun]) -> None:
        if isinstance(node, TextNode):
            if node.text:
                out.append(StyledRun(node.text, style.evolve(nest_level=nest_level)))
            return
        if not isinstance(node, ElementNode):
            raise ParsingError("Unsupported rich text node", details=type(node).__name__)

        new_style = _apply_inline_style(style, node.style)
        new_nest_level = nest_level
        starts_item = False
        tag = node.tag

        if tag == TagKind.BOLD:
            new_style = new_style.evolve(bold=True)
        elif tag == TagKind.ITALIC:
            new_style = new_style.evolve(italic=True)
        elif tag == TagKind.UNDERLINE:
            new_style = new_style.evolve(underline=True)
        elif tag in (TagKind.PARAGRAPH, TagKind.DIV):
            node, kind = normalize_list_glyph(node)
            if kind != ListKind.NONE:
                new_style = new_style.evolve(list_kind=kind, is_list_item=True)
                starts_item = True
        elif tag == TagKind.UNORDERED_LIST:
            new_style = new_style.evolve(list_kind=ListKind.BULLET)
            new_nest_level += 1
        elif tag == TagKind.ORDERED_LIST:
            new_style = new_style.evolve(list_kind=ListKind.ORDERED)
            new_nest_level += 1
        elif tag == TagKind.LIST_ITEM:
            node, kind = normalize_list_glyph(node)
            if kind == ListKind.NONE:
                kind = new_style.list_kind
            if kind == ListKind.NONE:
                kind = ListKind.BULLET
            new_style = new_style.evolve(list_kind=kind, is_list_item=True, nest_level=new_nest_level)
            starts_item = True
        elif tag == TagKind.LINE_BREAK:
            out.append(StyledRun(LINE_BREAK_TEXT, new_style.evolve(nest_level=nest_level)))
        elif tag == TagKind.HEADING:
            level = node.heading_level if 1 <= node.heading_level <= 3 else 1
            new_style = new_style.evolve(is_heading=True, heading_level=level)

        first = len(out)
        for child in node.children:
            self._visit(child, new_style, new_nest_level, out)
        if starts_item:
            _mark_item_continuations(out, first, new_nest_level)


def _mark_item_continuations(runs: List[StyledRun], first: int, nest_level: int) -> None:
    """Flag every text run of one list item after the one carrying its marker."""
    seen_text = False
    for index in range(first, len(runs)):
        run = runs[index]
        if run.is_break or not run.style.is_list_item or run.style.nest_level != nest_level:
            continue
        if not seen_text:
            if strip_list_marker(sanitize_text(run.text)).strip():
                seen_text = True
            continue
        if not run.continues_item:
            runs[index] = replace(run, continues_item=True)


def _apply_inline_style(style: RunStyle, inline: InlineStyle) -> RunStyle:
    if inline.is_empty():
        return style

    changes = {}
    if inline.color:
        changes["color"] = inline.color
    if inline.font_size is not None:
        changes["font_size"] = inline.font_size
    if inline.line_height is not None:
        changes["line_height"] = inline.line_height
    align = Align.from_css(inline.text_align)
    if align is not None:
        changes["align"] = align
    return style.evolve(**changes) if changes else style


def parse_runs(tree: Optional[RichTextNode]) -> List[StyledRun]:
    """Module-level shortcut for :meth:`StyleRunParser.parse`."""
    return StyleRunParser().parse(tree)
