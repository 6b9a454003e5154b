"""Unit conversions and small geometry helpers for layout calculations."""

from __future__ import annotations

from dataclasses import dataclass

MM_PER_INCH = 25.4
POINTS_PER_INCH = 72.0
MM_PER_POINT = MM_PER_INCH / POINTS_PER_INCH


def points_to_mm(value: float | None) -> float:
    if value is None:
        return 0.0
    return float(value) * MM_PER_POINT


def mm_to_points(value: float | None) -> float:
    if value is None:
        return 0.0
    return float(value) / MM_PER_POINT


@dataclass(slots=True)
class Size:
    width: float
    height: float

    @property
    def aspect(self) -> float:
        """Width over height; 0 for degenerate sizes."""
        if self.height <= 0:
            return 0.0
        return self.width / self.height

    def scaled_to_height(self, height: float) -> "Size":
        return Size(height * self.aspect, height)

    def scaled_to_width(self, width: float) -> "Size":
        aspect = self.aspect
        return Size(width, width / aspect if aspect else 0.0)

