"""
Page model - output of a pagination pass.

Every page holds draw blocks in paint order. Coordinates are millimetres
from the top-left corner of the page; ``y`` is the text baseline for text
blocks and the top edge for image blocks.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, List, Optional, Tuple, Union

RGB = Tuple[int, int, int]


def _num(value: float) -> float:
    return round(float(value), 4)


@dataclass(frozen=True, slots=True)
class FontSpec:
    """Font face flags and size in points."""

    bold: bool = False
    italic: bool = False
    size: float = 11.0

    @property
    def face(self) -> str:
        """Name of the matching standard Helvetica face."""
        if self.bold and self.italic:
            return "Helvetica-BoldOblique"
        if self.bold:
            return "Helvetica-Bold"
        if self.italic:
            return "Helvetica-Oblique"
        return "Helvetica"

    def to_dict(self) -> Dict[str, Any]:
        return {"bold": self.bold, "italic": self.italic, "size": _num(self.size)}


@dataclass(frozen=True, slots=True)
class TextLine:
    kind: ClassVar[str] = "text_line"

    x: float
    y: float
    text: str
    font: FontSpec = field(default_factory=FontSpec)
    color: RGB = (40, 40, 40)
    align: str = "left"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "x": _num(self.x),
            "y": _num(self.y),
            "text": self.text,
            "font": self.font.to_dict(),
            "color": list(self.color),
            "align": self.align,
        }


@dataclass(frozen=True, slots=True)
class ImageBlock:
    kind: ClassVar[str] = "image"

    x: float
    y: float
    w: float
    h: float
    image_ref: Any = None
    image_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        ref = self.image_ref if isinstance(self.image_ref, (str, int, float)) else None
        return {
            "kind": self.kind,
            "x": _num(self.x),
            "y": _num(self.y),
            "w": _num(self.w),
            "h": _num(self.h),
            "image_id": self.image_id,
            "image_ref": ref,
        }


@dataclass(frozen=True, slots=True)
class Caption:
    kind: ClassVar[str] = "caption"

    x: float
    y: float
    text: str
    align: str = "center"
    font: FontSpec = field(default_factory=lambda: FontSpec(italic=True, size=9.0))
    color: RGB = (120, 120, 120)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "x": _num(self.x),
            "y": _num(self.y),
            "text": self.text,
            "align": self.align,
            "font": self.font.to_dict(),
            "color": list(self.color),
        }


@dataclass(frozen=True, slots=True)
class PageNumber:
    kind: ClassVar[str] = "page_number"

    x: float
    y: float
    text: str
    font: FontSpec = field(default_factory=lambda: FontSpec(size=9.0))
    color: RGB = (150, 150, 150)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "x": _num(self.x),
            "y": _num(self.y),
            "text": self.text,
            "font": self.font.to_dict(),
            "color": list(self.color),
        }


DrawBlock = Union[TextLine, ImageBlock, Caption, PageNumber]


@dataclass
class Page:
    """A fixed-size page with positioned draw blocks."""

    index: int
    width: float = 210.0
    height: float = 297.0
    blocks: List[DrawBlock] = field(default_factory=list)

    @property
    def number(self) -> int:
        """1-based page number printed in the footer."""
        return self.index + 1

    def add(self, block: DrawBlock) -> None:
        self.blocks.append(block)

    def text_lines(self) -> List[TextLine]:
        return [b for b in self.blocks if isinstance(b, TextLine)]

    def images(self) -> List[ImageBlock]:
        return [b for b in self.blocks if isinstance(b, ImageBlock)]

    def captions(self) -> List[Caption]:
        return [b for b in self.blocks if isinstance(b, Caption)]

    def page_numbers(self) -> List[PageNumber]:
        return [b for b in self.blocks if isinstance(b, PageNumber)]

    def has_page_number(self) -> bool:
        return any(isinstance(b, PageNumber) for b in self.blocks)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "width": _num(self.width),
            "height": _num(self.height),
            "blocks": [block.to_dict() for block in self.blocks],
        }
