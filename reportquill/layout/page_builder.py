"""

Page builder - drives one pagination pass.

Order of a pass:
1. document title and date range, centered on the first page
2. every section: optional forced break, title, content runs, image rows
3. page numbers on every page, the first page last

Each pass owns its own page sequence, cursor and list counters; a builder
instance can run any number of passes over the same document.

"""

from __future__ import annotations

import asyncio
import logging
from typing import List, Optional

from ..config import LayoutConfig
from ..engine.text_metrics import TextMetricsEngine
from ..exceptions import DecodeFailure
from ..media.codec import ImageCodec
from ..models.document import Document, ImageEntry, Section
from ..models.page import Caption, FontSpec, ImageBlock, Page, TextLine
from ..parser.run_parser import StyleRunParser
from ..utils.text import sanitize_text
from .cursor import Cursor
from .image_rows import SUPPORTED_COLUMNS, ImageRowLayout, MeasuredImage, RowGeometry
from .list_state import ListStateTracker
from .paginator import PageSequence
from .text_flow import FlowState, TextFlowEngine

logger = logging.getLogger(__name__)

DEFAULT_COLUMNS = 2


class PageBuilder:
    """
    Turns a :class:`Document` into a list of :class:`Page`.

    Args:
        config: Page metrics and spacing, A4 defaults when omitted
        codec: Image codec used to rotate and measure images; without one
            the entries' natural sizes are used
        metrics: Text metrics engine shared by text flow and captions
    """

    def __init__(
        self,
        config: Optional[LayoutConfig] = None,
        codec: Optional[ImageCodec] = None,
        metrics: Optional[TextMetricsEngine] = None,
    ):
        self.config = config or LayoutConfig.a4()
        self.codec = codec
        self.metrics = metrics or TextMetricsEngine()
        self.run_parser = StyleRunParser()
        self.row_layout = ImageRowLayout(self.config, self.metrics)

    def build(self, document: Document) -> List[Page]:
        """Run a pass synchronously; must not be called from a running event loop."""
        return asyncio.run(self.build_async(document))

    async def build_async(self, document: Document) -> List[Page]:
        pages = PageSequence(self.config)
        flow = TextFlowEngine(self.config, pages, self.metrics)

        cursor = pages.start()
        cursor = self._emit_header(document, pages, cursor)
        for section in document.sections:
            cursor = await self._emit_section(document, section, pages, flow, cursor)

        result = pages.finish()
        logger.info(
            f"Paginated '{document.title}': {len(document.sections)} section(s), {len(result)} page(s)"
        )
        return result

    def _emit_header(self, document: Document, pages: PageSequence, cursor: Cursor) -> Cursor:
        config = self.config
        center = config.page_width / 2

        title = sanitize_text(document.title).strip()
        if title:
            cursor = pages.place(
                cursor,
                TextLine(
                    center,
                    cursor.y,
                    title,
                    FontSpec(bold=True, size=config.title_font_size),
                    document.title_color,
                    "center",
                ),
                content=False,
            )
        cursor = cursor.advance(config.title_after)

        date_text = sanitize_text(document.date_range_text).strip()
        if date_text:
            cursor = pages.place(
                cursor,
                TextLine(
                    center,
                    cursor.y,
                    date_text,
                    FontSpec(size=config.date_font_size),
                    config.date_color,
                    "center",
                ),
                content=False,
            )
            cursor = cursor.advance(config.date_after)
        return cursor

    async def _emit_section(
        self,
        document: Document,
        section: Section,
        pages: PageSequence,
        flow: TextFlowEngine,
        cursor: Cursor,
    ) -> Cursor:
        config = self.config
        first_page = cursor.page_index

        if section.start_on_new_page:
            cursor = pages.force_break(cursor)
        cursor = pages.ensure_space(cursor, config.section_header_reserve, "section header")

        title = sanitize_text(section.title).strip()
        if title:
            cursor = pages.place(
                cursor,
                TextLine(
                    config.margin,
                    cursor.y,
                    title,
                    FontSpec(bold=True, size=config.section_title_font_size),
                    document.section_title_color(section),
                ),
            )
        cursor = cursor.advance(config.section_title_after)

        runs = self.run_parser.parse(section.content_tree())
        state = FlowState(ListStateTracker(), config.body_font_size)
        cursor = flow.flow_runs(runs, cursor, state)

        cursor = await self._emit_images(section, pages, cursor)
        logger.debug(
            f"Section '{section.title}': {len(runs)} run(s), {len(section.images)} image(s), "
            f"pages {first_page + 1}-{cursor.page_index + 1}"
        )
        return cursor.advance(config.section_after)

    def _columns(self, section: Section) -> int:
        columns = section.image_layout.images_per_row
        if columns in SUPPORTED_COLUMNS:
            return columns
        logger.warning(
            f"Section '{section.title}': invalid images per row {columns!r}, using {DEFAULT_COLUMNS}"
        )
        return DEFAULT_COLUMNS

    async def _emit_images(self, section: Section, pages: PageSequence, cursor: Cursor) -> Cursor:
        if not section.images:
            return cursor

        columns = self._columns(section)
        entries = section.images
        for start in range(0, len(entries), columns):
            measured = []
            for entry in entries[start:start + columns]:
                image = await self._measure(entry)
                if image is not None:
                    measured.append(image)
            if not measured:
                continue

            row = self.row_layout.layout_row(measured, columns, section.image_layout.image_size)
            cursor = pages.ensure_space(cursor, row.total_height, "image row")
            cursor = self._place_row(row, pages, cursor)
        return cursor

    def _place_row(self, row: RowGeometry, pages: PageSequence, cursor: Cursor) -> Cursor:
        config = self.config
        top = cursor.y
        for placed in row.images:
            cursor = pages.place(
                cursor,
                ImageBlock(
                    placed.x,
                    top,
                    placed.width,
                    placed.height,
                    placed.image.image_ref,
                    placed.image.entry.id,
                ),
            )

        caption_top = top + row.image_height
        caption_font = FontSpec(italic=True, size=config.caption_font_size)
        for placed in row.images:
            for index, line in enumerate(placed.caption_lines):
                cursor = pages.place(
                    cursor,
                    Caption(
                        placed.center_x,
                        caption_top + (index + 1) * config.caption_line_height,
                        line,
                        "center",
                        caption_font,
                        config.caption_color,
                    ),
                )
        return cursor.advance(row.total_height)

    async def _measure(self, entry: ImageEntry) -> Optional[MeasuredImage]:
        """Effective size of an image, or None when it cannot be decoded."""
        try:
            if self.codec is None:
                width, height = entry.effective_size
                ref = entry.image_ref
            else:
                ref = entry.image_ref
                if entry.rotation_degrees % 360:
                    ref = await self.codec.rotate(ref, entry.rotation_degrees % 360)
                width, height = await self.codec.measure(ref)
            if width <= 0 or height <= 0:
                raise DecodeFailure(f"Invalid image size {width}x{height}", image_id=entry.id)
        except DecodeFailure as e:
            logger.warning(f"Skipping image '{entry.id}': {e}")
            return None
        return MeasuredImage(entry, ref, float(width), float(height))
