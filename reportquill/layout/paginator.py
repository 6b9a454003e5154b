"""

Page sequence for one pagination pass.

Owns the pages produced so far and decides when a new page starts:
- soft breaks, when the next unit would not fit above the printable bottom
- forced breaks, when a section asks to start on a new page

"""

from __future__ import annotations

import logging
from typing import List

from ..config import LayoutConfig
from ..models.page import DrawBlock, Page
from .cursor import Cursor
from .footer import PageNumberFooter

logger = logging.getLogger(__name__)

_EPSILON = 1e-6


class PageSequence:
    """
    Pages of a single pass plus the page-break policy.

    The first page is finalized last: its page number is stamped in
    :meth:`finish`, after every other page has been closed.
    """

    def __init__(self, config: LayoutConfig, footer: PageNumberFooter = None):
        self.config = config
        self.footer = footer or PageNumberFooter(config)
        self.pages: List[Page] = []

    def start(self) -> Cursor:
        """Open the first page and return a cursor at its top."""
        if self.pages:
            raise RuntimeError("PageSequence already started")
        self.pages.append(self._make_page(0))
        return Cursor(y=self.config.content_top, page_index=0)

    def fits(self, cursor: Cursor, height: float) -> bool:
        return cursor.y + height <= self.config.content_bottom + _EPSILON

    def at_page_top(self, cursor: Cursor) -> bool:
        return cursor.y <= self.config.content_top + _EPSILON

    def ensure_space(self, cursor: Cursor, height: float, unit: str = "line") -> Cursor:
        """
        Soft break: move to a new page when ``height`` does not fit.

        A unit that does not fit even on an empty page is placed anyway and
        allowed to overflow.
        """
        if self.fits(cursor, height):
            return cursor
        if self.at_page_top(cursor):
            logger.warning(
                f"Page {cursor.page_index + 1}: {unit} of {height:.1f}mm is taller than "
                f"the printable area; placing it with overflow"
            )
            return cursor
        logger.debug(f"Page {cursor.page_index + 1}: soft break before {unit} ({height:.1f}mm)")
        return self.new_page(cursor)

    def force_break(self, cursor: Cursor) -> Cursor:
        """Forced break: start a new page unless nothing was placed on this one yet."""
        if not cursor.has_content:
            return cursor
        logger.debug(f"Page {cursor.page_index + 1}: forced break")
        return self.new_page(cursor)

    def new_page(self, cursor: Cursor) -> Cursor:
        closing = self.pages[cursor.page_index]
        if closing.index != 0:
            self.footer.stamp(closing)
        page = self._make_page(len(self.pages))
        self.pages.append(page)
        return Cursor(y=self.config.content_top, page_index=page.index)

    def place(self, cursor: Cursor, block: DrawBlock, content: bool = True) -> Cursor:
        """Append ``block`` to the cursor's page."""
        self.pages[cursor.page_index].add(block)
        return cursor.with_content() if content else cursor

    def finish(self) -> List[Page]:
        """Stamp the remaining page numbers and return the pages."""
        if not self.pages:
            return []
        self.footer.stamp(self.pages[-1])
        self.footer.stamp(self.pages[0])
        return self.pages

    def _make_page(self, index: int) -> Page:
        return Page(index=index, width=self.config.page_width, height=self.config.page_height)
