"""Greedy line breaking on top of the text metrics engine."""

from __future__ import annotations

import logging
from typing import List

from ..models.page import FontSpec
from .text_metrics import TextMetricsEngine

logger = logging.getLogger(__name__)


class LineBreaker:
    """Simple greedy line breaker."""

    def __init__(self, metrics_engine: TextMetricsEngine) -> None:
        self.metrics_engine = metrics_engine

    def break_text(self, text: str, max_width: float, font: FontSpec) -> List[str]:
        """
        Wrap text to ``max_width``.

        Explicit newlines start a new line. A word wider than the line is
        placed on a line of its own rather than dropped.
        """
        if not text:
            return [""]

        lines: List[str] = []
        for chunk in text.split("\n"):
            lines.extend(self._break_chunk(chunk, max_width, font))
        return lines or [""]

    def _break_chunk(self, chunk: str, max_width: float, font: FontSpec) -> List[str]:
        words = chunk.split()
        if not words:
            return [""]

        lines: List[str] = []
        current_line = ""

        for word in words:
            candidate = f"{current_line} {word}" if current_line else word
            if self.metrics_engine.text_width(candidate, font) <= max_width:
                current_line = candidate
                continue

            if current_line:
                lines.append(current_line)
            current_line = word

            if self.metrics_engine.text_width(word, font) > max_width:
                logger.debug(f"Word wider than line ({max_width:.1f}mm): '{word[:30]}'")
                lines.append(word)
                current_line = ""

        if current_line:
            lines.append(current_line)

        return lines
