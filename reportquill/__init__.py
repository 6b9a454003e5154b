"""
reportquill - layout and pagination of titled, dated reports.

Turns a report (title, date range, sections of rich text and captioned
image grids) into fixed-size pages of positioned draw blocks.
"""

from .version import __version__, __version_info__
from .config import LayoutConfig
from .exceptions import ReportQuillError, ParsingError, LayoutError, MediaError, DecodeFailure
from .models import (
    Document,
    Section,
    ImageEntry,
    ImageLayout,
    ImageSize,
    Page,
    StyledRun,
    RunStyle,
    ListKind,
    Align,
)
from .parser import parse_html, parse_runs
from .layout import PageBuilder, ListStateTracker
from .media import ImageCodec, PillowImageCodec
from .export import pages_to_dict, pages_to_json
from .api import paginate, paginate_async
from .utils import setup_logging

__all__ = [
    "__version__",
    "__version_info__",
    "LayoutConfig",
    "ReportQuillError",
    "ParsingError",
    "LayoutError",
    "MediaError",
    "DecodeFailure",
    "Document",
    "Section",
    "ImageEntry",
    "ImageLayout",
    "ImageSize",
    "Page",
    "StyledRun",
    "RunStyle",
    "ListKind",
    "Align",
    "parse_html",
    "parse_runs",
    "PageBuilder",
    "ListStateTracker",
    "ImageCodec",
    "PillowImageCodec",
    "pages_to_dict",
    "pages_to_json",
    "paginate",
    "paginate_async",
    "setup_logging",
]
