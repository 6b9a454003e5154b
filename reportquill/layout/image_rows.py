"""
Image row layout.

Computes the geometry of one row of an image grid: image boxes that keep
their aspect ratio (never cropped), the wrapped caption lines under each
image and the height the row consumes on the page.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Tuple

from ..config import LayoutConfig
from ..engine.geometry import Size
from ..engine.line_breaker import LineBreaker
from ..engine.text_metrics import TextMetricsEngine
from ..exceptions import LayoutError
from ..models.document import ImageEntry, ImageSize
from ..models.page import FontSpec
from ..utils.text import sanitize_text

logger = logging.getLogger(__name__)

SUPPORTED_COLUMNS = (1, 2, 3)


@dataclass(frozen=True, slots=True)
class MeasuredImage:
    """An image entry with its effective (rotation-adjusted) pixel size."""

    entry: ImageEntry
    image_ref: Any
    width: float
    height: float

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)


@dataclass(frozen=True, slots=True)
class PlacedImage:
    """Final box of one image; ``x`` is absolute, the top is the row top."""

    image: MeasuredImage
    x: float
    width: float
    height: float
    caption_lines: Tuple[str, ...] = ()

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2


@dataclass(frozen=True, slots=True)
class RowGeometry:
    images: Tuple[PlacedImage, ...]
    image_height: float
    caption_height: float
    total_height: float


class ImageRowLayout:
    """Lays out rows of one to three images."""

    def __init__(self, config: LayoutConfig, metrics: Optional[TextMetricsEngine] = None):
        self.config = config
        self.line_breaker = LineBreaker(metrics or TextMetricsEngine())
        self.caption_font = FontSpec(italic=True, size=config.caption_font_size)

    def column_share(self, columns: int, available_width: float) -> float:
        """Width one image may use in a row of ``columns``."""
        return (available_width - (columns - 1) * self.config.image_gap) / columns

    def scale_images(
        self, images: Sequence[MeasuredImage], columns: int, image_size: ImageSize, share: float
    ) -> List[Size]:
        """
        Scaled sizes of the images of a row.

        Rows of one or two columns scale every image to the target height
        and fall back to the column share when that is too wide. Rows of
        three columns ignore the size class: the reference height is the
        smallest height at which an image fills its share, clamped to the
        configured range, and every image ends at one common height.
        """
        sources = [image.size for image in images]

        if columns < 3:
            target = self.config.row_height(columns, image_size)
            sizes = []
            for source in sources:
                scaled = source.scaled_to_height(target)
                if scaled.width > share:
                    scaled = source.scaled_to_width(share)
                sizes.append(scaled)
            return sizes

        candidates = [source.scaled_to_width(share).height for source in sources]
        reference = min(
            max(min(candidates), self.config.three_column_min_height),
            self.config.three_column_max_height,
        )

        sizes = []
        for source in sources:
            scaled = source.scaled_to_height(reference)
            if scaled.width > share:
                scaled = source.scaled_to_width(share)
            sizes.append(scaled)

        # Equal heights across the row; shrinking keeps every width within its share
        common = min(size.height for size in sizes)
        return [source.scaled_to_height(common) for source in sources]

    def wrap_caption(self, caption: str, width: float) -> Tuple[str, ...]:
        text = sanitize_text(caption or "").strip()
        if not text:
            return ()
        lines = self.line_breaker.break_text(text, width, self.caption_font)
        return tuple(line.strip() for line in lines if line.strip())

    def caption_height(self, lines: Sequence[str]) -> float:
        if not lines:
            return 0.0
        return len(lines) * self.config.caption_line_height + self.config.caption_padding

    def layout_row(
        self,
        images: Sequence[MeasuredImage],
        columns: int,
        image_size: ImageSize,
        available_width: Optional[float] = None,
    ) -> RowGeometry:
        """
        Compute the geometry of one row.

        Args:
            images: One to ``columns`` measured images
            columns: Configured images per row of the section
            image_size: Size class of the section grid
            available_width: Row width, the text width by default

        Returns:
            RowGeometry with absolute x positions; the row is centered
            between the margins
        """
        if not images:
            return RowGeometry((), 0.0, 0.0, 0.0)
        if columns not in SUPPORTED_COLUMNS:
            raise LayoutError(f"Unsupported column count: {columns}")

        config = self.config
        if available_width is None:
            available_width = config.text_width
        share = self.column_share(columns, available_width)
        sizes = self.scale_images(images, columns, image_size, share)

        row_width = sum(size.width for size in sizes) + config.image_gap * (len(sizes) - 1)
        x = config.margin + (available_width - row_width) / 2

        placed = []
        for image, size in zip(images, sizes):
            lines = self.wrap_caption(image.entry.caption, size.width)
            placed.append(PlacedImage(image, x, size.width, size.height, lines))
            x += size.width + config.image_gap

        image_height = max(item.height for item in placed)
        caption_height = max(self.caption_height(item.caption_lines) for item in placed)
        total = image_height + caption_height + config.image_row_gap
        logger.debug(
            f"Image row: {len(placed)} image(s) in {columns} column(s), "
            f"height {image_height:.1f}mm + captions {caption_height:.1f}mm"
        )
        return RowGeometry(tuple(placed), image_height, caption_height, total)
