"""

TextMetricsEngine - measuring text width with ReportLab font metrics.

Widths are returned in millimetres so they can be compared directly with
page geometry.

"""

from __future__ import annotations

from functools import lru_cache

from reportlab.pdfbase import pdfmetrics

from ..models.page import FontSpec
from .geometry import points_to_mm

STANDARD_FACES = (
    "Helvetica",
    "Helvetica-Bold",
    "Helvetica-Oblique",
    "Helvetica-BoldOblique",
)


@lru_cache(maxsize=4096)
def _string_width_pt(text: str, face: str, size: float) -> float:
    return pdfmetrics.stringWidth(text, face, size)


class TextMetricsEngine:
    """

    Engine for calculating text metrics.

    Uses the standard Helvetica faces, which ReportLab ships with AFM
    metrics, so no font files need to be registered.

    """

    def __init__(self, faces=STANDARD_FACES):
        self.faces = tuple(faces)

    def resolve_face(self, font: FontSpec) -> str:
        face = font.face
        return face if face in self.faces else self.faces[0]

    def text_width(self, text: str, font: FontSpec) -> float:
        """

        Measures text width.

        Args:
        text: Text to measure
        font: Face flags and size in points

        Returns:
        Width in millimetres

        """
        if not text:
            return 0.0
        return points_to_mm(_string_width_pt(text, self.resolve_face(font), float(font.size)))
