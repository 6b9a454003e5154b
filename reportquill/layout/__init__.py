"""
Layout module - cursor, list state, text flow, image rows and pagination.
"""

from .cursor import Cursor
from .list_state import ListStateTracker
from .footer import PageNumberFooter
from .paginator import PageSequence
from .text_flow import FlowState, LineGeometry, TextFlowEngine
from .image_rows import ImageRowLayout, MeasuredImage, PlacedImage, RowGeometry
from .page_builder import PageBuilder

__all__ = [
    "Cursor",
    "ListStateTracker",
    "PageNumberFooter",
    "PageSequence",
    "FlowState",
    "LineGeometry",
    "TextFlowEngine",
    "ImageRowLayout",
    "MeasuredImage",
    "PlacedImage",
    "RowGeometry",
    "PageBuilder",
]
