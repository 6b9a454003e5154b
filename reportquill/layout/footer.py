"""
Page number footer.

Stamps a centered page number near the bottom edge of a page. Stamping is
idempotent so a page can be finalized from more than one place.
"""

import logging

from ..config import LayoutConfig
from ..models.page import FontSpec, Page, PageNumber

logger = logging.getLogger(__name__)


class PageNumberFooter:
    """Adds the running page number to pages as they are closed."""

    def __init__(self, config: LayoutConfig):
        self.config = config

    def stamp(self, page: Page) -> bool:
        """
        Add the page number block to ``page``.

        Args:
            page: Page being closed

        Returns:
            True if a block was added, False if the page already had one
        """
        if page.has_page_number():
            return False

        page.add(
            PageNumber(
                x=page.width / 2,
                y=page.height - self.config.page_number_offset,
                text=str(page.number),
                font=FontSpec(size=self.config.page_number_font_size),
                color=self.config.page_number_color,
            )
        )
        logger.debug(f"Page {page.number}: page number stamped")
        return True
