"""Color parsing for inline styles and document defaults."""

from __future__ import annotations

import re
from typing import Optional, Tuple

RGB = Tuple[int, int, int]

NAMED_COLORS = {
    'black': (0, 0, 0),
    'white': (255, 255, 255),
    'red': (255, 0, 0),
    'green': (0, 128, 0),
    'lime': (0, 255, 0),
    'blue': (0, 0, 255),
    'navy': (0, 0, 128),
    'yellow': (255, 255, 0),
    'orange': (255, 165, 0),
    'purple': (128, 0, 128),
    'cyan': (0, 255, 255),
    'magenta': (255, 0, 255),
    'gray': (128, 128, 128),
    'grey': (128, 128, 128),
    'silver': (192, 192, 192),
    'maroon': (128, 0, 0),
    'teal': (0, 128, 128),
    'olive': (128, 128, 0),
}

_RGB_FUNC = re.compile(r"^rgba?\(\s*([^)]*)\)$", re.IGNORECASE)


def hex_to_rgb(hex_color: str) -> Optional[RGB]:
    """Convert ``#rgb`` / ``#rrggbb`` to an RGB tuple."""
    hex_color = hex_color.strip().lstrip('#')
    if len(hex_color) == 3:
        hex_color = ''.join(c * 2 for c in hex_color)
    if len(hex_color) != 6:
        return None
    try:
        return tuple(int(hex_color[i:i + 2], 16) for i in (0, 2, 4))  # type: ignore[return-value]
    except ValueError:
        return None


def rgb_to_hex(rgb: RGB) -> str:
    r, g, b = rgb
    return f"#{r:02x}{g:02x}{b:02x}"


def _clamp_channel(value: float) -> int:
    return max(0, min(255, int(round(value))))


def parse_color(value) -> Optional[RGB]:
    """
    Parse a CSS-ish color value.

    Args:
        value: ``#hex``, ``rgb()``/``rgba()``, a named color or an
            ``(r, g, b)`` sequence

    Returns:
        RGB tuple, or None when the value cannot be understood
    """
    if value is None:
        return None

    if isinstance(value, (tuple, list)):
        if len(value) != 3:
            return None
        try:
            return tuple(_clamp_channel(float(c)) for c in value)  # type: ignore[return-value]
        except (TypeError, ValueError):
            return None

    if not isinstance(value, str):
        return None

    text = value.strip().lower()
    if not text:
        return None
    if text.startswith('#'):
        return hex_to_rgb(text)

    match = _RGB_FUNC.match(text)
    if match:
        parts = [p.strip() for p in match.group(1).split(',')]
        if len(parts) < 3:
            return None
        channels = []
        for part in parts[:3]:
            try:
                if part.endswith('%'):
                    channels.append(_clamp_channel(float(part[:-1]) * 255 / 100))
                else:
                    channels.append(_clamp_channel(float(part)))
            except ValueError:
                return None
        return tuple(channels)  # type: ignore[return-value]

    return NAMED_COLORS.get(text)
