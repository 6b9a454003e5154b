"""Custom exceptions for reportquill."""

from typing import Optional


class ReportQuillError(Exception):
    """Base exception for reportquill errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ParsingError(ReportQuillError):
    """Exception raised while turning rich text into a tree or runs."""

    pass


class LayoutError(ReportQuillError):
    """Exception raised during layout calculation."""

    pass


class MediaError(ReportQuillError):
    """Exception raised during media processing."""

    pass


class DecodeFailure(MediaError):
    """An image could not be measured or rotated by the codec.

    The page builder catches this, logs it and lays out the row without the
    image.
    """

    def __init__(self, message: str, image_id: Optional[str] = None, details: Optional[str] = None):
        super().__init__(message, details)
        self.image_id = image_id
