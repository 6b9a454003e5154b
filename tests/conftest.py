"""
Pytest configuration for reportquill
"""

import io
import logging

import pytest
from PIL import Image

from reportquill.config import LayoutConfig
from reportquill.engine.text_metrics import TextMetricsEngine
from reportquill.exceptions import DecodeFailure
from reportquill.models.document import Document, ImageEntry, ImageLayout, ImageSize, Section
from reportquill.models.rich_text import TagKind, element, paragraph
from reportquill.utils.logger import ROOT_LOGGER_NAME, setup_logging


@pytest.fixture(autouse=True)
def configure_logging():
    """Configure console logging for tests; records still propagate to caplog."""
    logger = setup_logging(level="WARNING", use_rich=False)
    logger.propagate = True

    yield

    # Cleanup after test
    logging.getLogger(ROOT_LOGGER_NAME).handlers.clear()


class FakeCodec:
    """
    Async codec over ``(width, height)`` tuples.

    A ``None`` reference fails to decode. Calls are recorded in order.
    """

    def __init__(self):
        self.calls = []

    async def measure(self, ref):
        self.calls.append(("measure", ref))
        if ref is None:
            raise DecodeFailure("cannot decode")
        return ref

    async def rotate(self, ref, degrees):
        self.calls.append(("rotate", ref, degrees))
        if ref is None:
            raise DecodeFailure("cannot rotate")
        width, height = ref
        if degrees % 180 == 90:
            return (height, width)
        return ref


@pytest.fixture
def config():
    """Default A4 layout configuration."""
    return LayoutConfig.a4()


@pytest.fixture
def metrics():
    return TextMetricsEngine()


@pytest.fixture
def fake_codec():
    return FakeCodec()


@pytest.fixture
def png_bytes():
    """Factory for in-memory PNG images."""

    def make(width, height, color=(200, 30, 30)):
        buffer = io.BytesIO()
        Image.new("RGB", (width, height), color=color).save(buffer, format="PNG")
        return buffer.getvalue()

    return make


@pytest.fixture
def summary_document():
    """One-section report with a paragraph, a break and a bullet item."""
    content = element(
        TagKind.DIV,
        paragraph("Intro"),
        element(TagKind.LINE_BREAK),
        element(TagKind.UNORDERED_LIST, element(TagKind.LIST_ITEM, "Point one")),
    )
    return Document(
        title="Weekly Report",
        date_range_text="2024-01-01 to 2024-01-07",
        sections=[Section(title="Summary", content=content)],
    )


def make_images(count, width=300, height=400, caption=""):
    return tuple(
        ImageEntry(id=f"img-{i}", image_ref=f"img-{i}.png", natural_width=width, natural_height=height, caption=caption)
        for i in range(count)
    )


def make_section(title="Photos", images=(), per_row=2, size=ImageSize.MEDIUM, **kwargs):
    return Section(title=title, images=images, image_layout=ImageLayout(per_row, size), **kwargs)
