"""
Media module - image codec adapters.
"""

from .codec import ImageCodec, PillowImageCodec

__all__ = [
    "ImageCodec",
    "PillowImageCodec",
]
