"""Styled runs - flat output of the run parser."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional


class ListKind(str, Enum):
    """Marker family of a list item."""

    NONE = "none"
    BULLET = "bullet"
    DASH = "dash"
    ORDERED = "ordered"


class Align(str, Enum):
    """Horizontal alignment of a run."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"

    @classmethod
    def from_css(cls, value: Optional[str]) -> Optional["Align"]:
        """Map a CSS ``text-align`` value; unknown values yield None."""
        if not value:
            return None
        value = str(value).strip().lower()
        if value in ("left", "start", "justify"):
            return cls.LEFT
        if value in ("center", "middle"):
            return cls.CENTER
        if value in ("right", "end"):
            return cls.RIGHT
        return None


@dataclass(frozen=True, slots=True)
class RunStyle:
    """
    Resolved style of a run.

    Values are inherited down the rich text tree and overridden by
    descendants; ``color``/``font_size``/``line_height`` stay ``None`` until
    some element sets them, in which case layout uses the role default.
    """

    bold: bool = False
    italic: bool = False
    underline: bool = False
    is_heading: bool = False
    heading_level: int = 0
    list_kind: ListKind = ListKind.NONE
    is_list_item: bool = False
    nest_level: int = 0
    align: Align = Align.LEFT
    color: Optional[str] = None
    font_size: Optional[float] = None
    line_height: Optional[float] = None

    def evolve(self, **changes) -> "RunStyle":
        return replace(self, **changes)


LINE_BREAK_TEXT = "\n"


@dataclass(frozen=True, slots=True)
class StyledRun:
    """
    A span of text sharing one resolved style.

    ``continues_item`` is set on the runs of a list item after its first
    text run; those are laid out at the item text column without a marker.
    """

    text: str
    style: RunStyle = field(default_factory=RunStyle)
    continues_item: bool = False

    @property
    def is_break(self) -> bool:
        """Explicit break: carries no content, only advances the cursor."""
        return self.text == LINE_BREAK_TEXT
