"""
Text flow engine.

Wraps styled runs to the available width, advances the vertical cursor and
asks the page sequence for soft breaks. The first run of a list item gets
its marker from a :class:`ListStateTracker` before its first wrapped line;
later runs of the same item continue at the item text column.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from ..config import LayoutConfig
from ..engine.line_breaker import LineBreaker
from ..engine.text_alignment import TextAlignmentEngine
from ..engine.text_metrics import TextMetricsEngine
from ..models.page import RGB, FontSpec, TextLine
from ..models.run import Align, ListKind, RunStyle, StyledRun
from ..utils.colors import parse_color
from ..utils.text import sanitize_text, strip_list_marker
from .cursor import Cursor
from .list_state import ListStateTracker
from .paginator import PageSequence

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class FlowState:
    """Per-section state carried from run to run."""

    tracker: ListStateTracker = field(default_factory=ListStateTracker)
    # Size of the last flowed run; explicit breaks advance by half of it
    font_size: float = 11.0


@dataclass(frozen=True, slots=True)
class LineGeometry:
    """Where the lines of one run go and how wide they may be."""

    x: float
    available_width: float
    align: Align
    marker_x: Optional[float] = None


class TextFlowEngine:
    """Flows runs onto the pages of one pass."""

    def __init__(
        self,
        config: LayoutConfig,
        pages: PageSequence,
        metrics: Optional[TextMetricsEngine] = None,
    ):
        self.config = config
        self.pages = pages
        self.metrics = metrics or TextMetricsEngine()
        self.line_breaker = LineBreaker(self.metrics)

    def resolve_font(self, style: RunStyle) -> FontSpec:
        """Face flags and size of a run; headings are always bold."""
        if style.font_size:
            size = float(style.font_size)
        elif style.is_heading:
            size = self.config.heading_font_size
        else:
            size = self.config.body_font_size
        return FontSpec(bold=style.bold or style.is_heading, italic=style.italic, size=size)

    def resolve_color(self, style: RunStyle) -> RGB:
        return parse_color(style.color) or self.config.body_color

    def line_geometry(self, style: RunStyle) -> LineGeometry:
        """
        Anchor and available width of a run's lines.

        List items are left aligned from their indent: the marker sits at
        ``margin + nest_level * list_indent`` and the text one gutter further.
        """
        config = self.config
        if style.is_list_item:
            marker_x = config.margin + max(0, style.nest_level) * config.list_indent
            x = marker_x + config.marker_gutter
            return LineGeometry(
                x=x,
                available_width=max(0.0, config.page_width - x - config.margin),
                align=Align.LEFT,
                marker_x=marker_x,
            )
        return LineGeometry(
            x=TextAlignmentEngine.anchor_x(config, style.align),
            available_width=config.text_width,
            align=style.align,
        )

    def line_spacing(self, style: RunStyle, font_size: float) -> float:
        """Advance between two wrapped lines of the same run."""
        if style.line_height:
            return float(style.line_height) * font_size * self.config.line_height_factor
        return font_size * self.config.default_line_spacing_factor

    def trailing_spacing(self, style: RunStyle) -> float:
        if style.is_heading:
            return self.config.heading_spacing
        if style.is_list_item:
            return self.config.list_item_spacing
        return self.config.paragraph_spacing

    def flow_runs(self, runs: Iterable[StyledRun], cursor: Cursor, state: FlowState) -> Cursor:
        for run in runs:
            cursor = self.flow_run(run, cursor, state)
        return cursor

    def flow_run(self, run: StyledRun, cursor: Cursor, state: FlowState) -> Cursor:
        """
        Place one run.

        Args:
            run: Styled run from the run parser
            cursor: Current position
            state: Section flow state (list counters, last font size)

        Returns:
            Cursor after the run, including its trailing spacing
        """
        if run.is_break:
            return cursor.advance(state.font_size * self.config.break_spacing_factor)

        style = run.style
        text = sanitize_text(run.text)
        if style.is_list_item and not run.continues_item:
            text = strip_list_marker(text)
        if not text.strip():
            return cursor

        font = self.resolve_font(style)
        color = self.resolve_color(style)
        geometry = self.line_geometry(style)
        lines = self.line_breaker.break_text(text.strip(" "), geometry.available_width, font)

        cursor = self.pages.ensure_space(cursor, self.config.line_reserve)

        if geometry.marker_x is not None and not run.continues_item:
            kind = style.list_kind if style.list_kind != ListKind.NONE else ListKind.BULLET
            marker = state.tracker.next_marker(style.nest_level, kind)
            cursor = self.pages.place(
                cursor, TextLine(geometry.marker_x, cursor.y, marker, font, color)
            )

        spacing = self.line_spacing(style, font.size)
        for index, line in enumerate(lines):
            if index:
                cursor = cursor.advance(spacing)
                cursor = self.pages.ensure_space(cursor, self.config.continuation_reserve)
            if not line.strip():
                continue
            cursor = self.pages.place(
                cursor,
                TextLine(geometry.x, cursor.y, line, font, color, geometry.align.value),
            )

        state.font_size = font.size
        return cursor.advance(self.trailing_spacing(style))
