"""
Layout configuration - page metrics and spacing constants.

All lengths are millimetres, font sizes are points. The defaults reproduce
the A4 report layout; values must stay as they are for output compatibility
with previously exported reports.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, Mapping, Tuple

from .models.document import ImageSize

logger = logging.getLogger(__name__)

RGB = Tuple[int, int, int]

# (columns, size class) -> target row height in mm
DEFAULT_ROW_HEIGHTS: Dict[Tuple[int, ImageSize], float] = {
    (1, ImageSize.SMALL): 80.0,
    (1, ImageSize.MEDIUM): 110.0,
    (1, ImageSize.LARGE): 140.0,
    (2, ImageSize.SMALL): 60.0,
    (2, ImageSize.MEDIUM): 90.0,
    (2, ImageSize.LARGE): 120.0,
    (3, ImageSize.SMALL): 40.0,
    (3, ImageSize.MEDIUM): 70.0,
    (3, ImageSize.LARGE): 100.0,
}


@dataclass(frozen=True, slots=True)
class LayoutConfig:
    """Page metrics and spacing used by one pagination pass."""

    page_width: float = 210.0
    page_height: float = 297.0
    margin: float = 10.0
    # Cursor starts (and resets) at margin + top_offset
    top_offset: float = 5.0
    # Room kept free above the bottom margin for the page number
    footer_reserve: float = 10.0

    title_after: float = 8.0
    date_after: float = 6.0
    section_title_after: float = 9.0
    paragraph_spacing: float = 6.0
    heading_spacing: float = 6.0
    list_item_spacing: float = 6.0
    section_after: float = 5.0
    image_gap: float = 3.0
    image_row_gap: float = 3.0

    # Space a unit must find on the page before it is placed
    section_header_reserve: float = 20.0
    line_reserve: float = 6.0
    continuation_reserve: float = 5.0

    list_indent: float = 4.0
    marker_gutter: float = 5.0

    title_font_size: float = 22.0
    date_font_size: float = 11.0
    section_title_font_size: float = 12.0
    heading_font_size: float = 12.0
    body_font_size: float = 11.0
    caption_font_size: float = 9.0
    page_number_font_size: float = 9.0

    # Multiplier applied to explicit line heights (lineHeight * size * 0.4)
    line_height_factor: float = 0.4
    # Spacing between wrapped lines when no line height is given (size * 0.5)
    default_line_spacing_factor: float = 0.5
    # Cursor advance for an explicit break (current size * 0.5)
    break_spacing_factor: float = 0.5

    caption_line_height: float = 4.0
    caption_padding: float = 2.0
    page_number_offset: float = 10.0

    date_color: RGB = (100, 100, 100)
    body_color: RGB = (40, 40, 40)
    caption_color: RGB = (120, 120, 120)
    page_number_color: RGB = (150, 150, 150)

    row_heights: Dict[Tuple[int, ImageSize], float] = field(
        default_factory=lambda: dict(DEFAULT_ROW_HEIGHTS)
    )
    three_column_min_height: float = 40.0
    three_column_max_height: float = 100.0

    @property
    def content_top(self) -> float:
        return self.margin + self.top_offset

    @property
    def content_bottom(self) -> float:
        """Lowest cursor position a unit may reach before a break is forced."""
        return self.page_height - self.margin - self.footer_reserve

    @property
    def text_width(self) -> float:
        return self.page_width - 2 * self.margin

    @property
    def printable_height(self) -> float:
        return self.content_bottom - self.content_top

    def row_height(self, columns: int, size: ImageSize) -> float:
        return self.row_heights.get((columns, size), DEFAULT_ROW_HEIGHTS[(2, ImageSize.MEDIUM)])

    @classmethod
    def a4(cls) -> "LayoutConfig":
        return cls()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LayoutConfig":
        """
        Build a config from a plain mapping.

        Args:
            data: Overrides keyed by field name

        Returns:
            LayoutConfig with the overrides applied; unknown keys are ignored,
            malformed values keep their defaults
        """
        defaults = cls()
        known = {f.name: f for f in fields(cls)}
        overrides: Dict[str, Any] = {}

        for key, value in (data or {}).items():
            if key not in known:
                logger.debug(f"Ignoring unknown layout option '{key}'")
                continue
            if key == "row_heights":
                overrides[key] = _parse_row_heights(value, defaults.row_heights)
                continue
            current = getattr(defaults, key)
            try:
                if isinstance(current, tuple):
                    overrides[key] = tuple(int(c) for c in value)[:3]
                else:
                    overrides[key] = float(value)
            except (TypeError, ValueError):
                logger.warning(f"Invalid value for layout option '{key}': {value!r}; using default {current!r}")

        return replace(defaults, **overrides)


def _parse_row_heights(value: Any, base: Dict[Tuple[int, ImageSize], float]) -> Dict[Tuple[int, ImageSize], float]:
    """Accept ``{"2": {"small": 60}}`` or ``{(2, "small"): 60}`` shapes."""
    merged = dict(base)
    if not isinstance(value, Mapping):
        logger.warning(f"Invalid row_heights option: {value!r}; using defaults")
        return merged

    for key, entry in value.items():
        try:
            if isinstance(key, tuple):
                columns, size = key
                merged[(int(columns), ImageSize.coerce(size))] = float(entry)
            elif isinstance(entry, Mapping):
                for size, height in entry.items():
                    merged[(int(key), ImageSize.coerce(size))] = float(height)
        except (TypeError, ValueError):
            logger.warning(f"Invalid row height entry {key!r}: {entry!r}")
    return merged
