"""
Utility helpers shared by the parser and layout packages.
"""

from .colors import RGB, parse_color, hex_to_rgb, rgb_to_hex
from .logger import get_logger, setup_logging
from .text import sanitize_text, strip_list_marker, format_date_range

__all__ = [
    "RGB",
    "parse_color",
    "hex_to_rgb",
    "rgb_to_hex",
    "get_logger",
    "setup_logging",
    "sanitize_text",
    "strip_list_marker",
    "format_date_range",
]
