"""

Anchor X position of a text line for a given alignment.

The page model stores the anchor and the alignment; the renderer draws
centered text around ``x`` and right-aligned text ending at ``x``, the same
convention as ReportLab's ``drawCentredString``/``drawRightString``.

"""

from __future__ import annotations

from ..config import LayoutConfig
from ..models.run import Align


class TextAlignmentEngine:
    """
    Computes the anchor X for left, centered and right aligned lines.
    """

    @staticmethod
    def anchor_x(config: LayoutConfig, alignment: Align = Align.LEFT) -> float:
        """

        Calculates the anchor position of a body line.

        Args:
        config: Page metrics
        alignment: Run alignment

        Returns:
        X position in millimetres

        """
        if alignment == Align.CENTER:
            return config.page_width / 2
        if alignment == Align.RIGHT:
            return config.page_width - config.margin
        return config.margin
