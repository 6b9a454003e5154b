"""
Engine primitives: geometry, text metrics, line breaking and alignment.
"""

from .geometry import Size, points_to_mm, mm_to_points
from .text_metrics import TextMetricsEngine
from .line_breaker import LineBreaker
from .text_alignment import TextAlignmentEngine

__all__ = [
    "Size",
    "points_to_mm",
    "mm_to_points",
    "TextMetricsEngine",
    "LineBreaker",
    "TextAlignmentEngine",
]
