"""
Document model handed to the page builder.

The model is treated as immutable for the duration of a pagination pass;
callers must not mutate it while a pass is running.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Tuple, Union

from .rich_text import ElementNode, RichTextNode, TagKind

RGB = Tuple[int, int, int]

DEFAULT_TITLE_COLOR: RGB = (40, 40, 40)


class ImageSize(str, Enum):
    """Size class selecting the target row height of an image grid."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"

    @classmethod
    def coerce(cls, value: Any) -> "ImageSize":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.MEDIUM


@dataclass(frozen=True, slots=True)
class ImageLayout:
    """Grid settings of a section: columns per row and size class."""

    images_per_row: int = 2
    image_size: ImageSize = ImageSize.MEDIUM


@dataclass(frozen=True, slots=True)
class ImageEntry:
    """
    One photograph of a section.

    ``image_ref`` is an opaque handle owned by the image codec; the engine
    never touches pixel data, it only reads dimensions.
    """

    id: str
    image_ref: Any = None
    natural_width: float = 0.0
    natural_height: float = 0.0
    rotation_degrees: int = 0
    caption: str = ""

    @property
    def effective_size(self) -> Tuple[float, float]:
        """Width/height once ``rotation_degrees`` is applied."""
        if self.rotation_degrees % 180 == 90:
            return float(self.natural_height), float(self.natural_width)
        return float(self.natural_width), float(self.natural_height)


SectionContent = Union[RichTextNode, str, None]


@dataclass(frozen=True, slots=True)
class Section:
    """A titled unit of rich text followed by an image grid."""

    title: str
    content: SectionContent = None
    images: Tuple[ImageEntry, ...] = field(default_factory=tuple)
    image_layout: ImageLayout = field(default_factory=ImageLayout)
    title_color: Optional[RGB] = None
    start_on_new_page: bool = False

    def __post_init__(self):
        if not isinstance(self.images, tuple):
            object.__setattr__(self, "images", tuple(self.images))

    def content_tree(self) -> RichTextNode:
        """Return the content as a rich text tree, parsing HTML strings."""
        if self.content is None:
            return ElementNode(TagKind.DIV)
        if isinstance(self.content, str):
            from ..parser.html_parser import parse_html

            return parse_html(self.content)
        return self.content


@dataclass(frozen=True, slots=True)
class Document:
    """A report: title, date range and ordered sections."""

    title: str
    date_range_text: str = ""
    sections: Tuple[Section, ...] = field(default_factory=tuple)
    title_color: RGB = DEFAULT_TITLE_COLOR

    def __post_init__(self):
        if not isinstance(self.sections, tuple):
            object.__setattr__(self, "sections", tuple(self.sections))

    def section_title_color(self, section: Section) -> RGB:
        return section.title_color or self.title_color

    def image_count(self) -> int:
        return sum(len(section.images) for section in self.sections)
