"""
Image codec adapters.

The page builder never touches pixel data; it asks a codec for the size of
an image and for a rotated copy. Codec calls are the only suspension points
of a pagination pass.
"""

from __future__ import annotations

import asyncio
import io
import logging
from pathlib import Path
from typing import Any, Protocol, Tuple, Union, runtime_checkable

from PIL import Image, UnidentifiedImageError

from ..exceptions import DecodeFailure

logger = logging.getLogger(__name__)

ImageSource = Union[str, Path, bytes, bytearray, memoryview]


@runtime_checkable
class ImageCodec(Protocol):
    """Collaborator resolving image dimensions and rotations."""

    async def measure(self, ref: Any) -> Tuple[float, float]:
        """Pixel width and height of ``ref``."""
        ...

    async def rotate(self, ref: Any, degrees: int) -> Any:
        """Reference to a copy of ``ref`` turned clockwise by ``degrees``."""
        ...


class PillowImageCodec:
    """
    Codec backed by Pillow.

    References are filesystem paths or encoded image bytes. Rotated images
    are returned as PNG bytes. Any Pillow error surfaces as
    :class:`DecodeFailure`.
    """

    def __init__(self, output_format: str = "PNG"):
        self.output_format = output_format
        logger.debug(f"PillowImageCodec initialized (format={output_format})")

    async def measure(self, ref: ImageSource) -> Tuple[float, float]:
        return await asyncio.to_thread(self._measure_sync, ref)

    async def rotate(self, ref: ImageSource, degrees: int) -> bytes:
        return await asyncio.to_thread(self._rotate_sync, ref, degrees)

    @staticmethod
    def _open(ref: ImageSource) -> Image.Image:
        if isinstance(ref, (bytes, bytearray, memoryview)):
            return Image.open(io.BytesIO(bytes(ref)))
        if isinstance(ref, (str, Path)):
            return Image.open(ref)
        raise DecodeFailure(f"Unsupported image reference type: {type(ref).__name__}")

    def _measure_sync(self, ref: ImageSource) -> Tuple[float, float]:
        try:
            with self._open(ref) as img:
                width, height = img.size
        except DecodeFailure:
            raise
        except (OSError, UnidentifiedImageError, ValueError) as e:
            raise DecodeFailure(f"Cannot read image: {e}") from e

        if width <= 0 or height <= 0:
            raise DecodeFailure(f"Image has no pixels ({width}x{height})")
        return float(width), float(height)

    def _rotate_sync(self, ref: ImageSource, degrees: int) -> bytes:
        try:
            with self._open(ref) as img:
                # Pillow rotates counter-clockwise
                rotated = img.rotate(-int(degrees), expand=True)
                buffer = io.BytesIO()
                rotated.save(buffer, format=self.output_format)
        except DecodeFailure:
            raise
        except (OSError, UnidentifiedImageError, ValueError) as e:
            raise DecodeFailure(f"Cannot rotate image by {degrees} degrees: {e}") from e

        logger.debug(f"Image rotated by {degrees} degrees ({rotated.size[0]}x{rotated.size[1]})")
        return buffer.getvalue()
