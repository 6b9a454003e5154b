"""Vertical cursor threaded through a pagination pass."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True)
class Cursor:
    """
    Position of the next unit on the current page.

    ``has_content`` becomes true once section content (a section title, a
    text line or an image row) has been placed on the page; the document
    title and date line do not count. Forced breaks only happen when it is
    set, so a page is never left blank.
    """

    y: float
    page_index: int = 0
    has_content: bool = False

    def advance(self, dy: float) -> "Cursor":
        return replace(self, y=self.y + dy)

    def with_content(self) -> "Cursor":
        if self.has_content:
            return self
        return replace(self, has_content=True)
