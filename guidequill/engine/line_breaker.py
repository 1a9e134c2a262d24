"""Greedy line breaking against a maximum width."""

from __future__ import annotations

import logging
from typing import List

from ..styles.style_context import StyleContext
from .text_metrics import TextMetricsEngine

logger = logging.getLogger(__name__)


class LineBreaker:
    """Simple greedy line breaker.

    Explicit newlines always end a line. Words wider than the limit are split
    by characters so nothing runs past the right edge. Empty input yields a
    single empty line.
    """

    def __init__(self, metrics_engine: TextMetricsEngine) -> None:
        self.metrics_engine = metrics_engine

    def break_text(self, text: str, max_width: float, style: StyleContext) -> List[str]:
        lines: List[str] = []
        for paragraph in text.split("\n"):
            lines.extend(self._break_paragraph(paragraph, max_width, style))
        return lines or [""]

    def _fits(self, text: str, max_width: float, style: StyleContext) -> bool:
        return self.metrics_engine.measure_text(text, style) <= max_width

    def _break_paragraph(self, text: str, max_width: float, style: StyleContext) -> List[str]:
        words = text.split()
        if not words:
            return [""]

        lines: List[str] = []
        current_line = ""
        for word in words:
            candidate = f"{current_line} {word}" if current_line else word
            if self._fits(candidate, max_width, style):
                current_line = candidate
                continue

            if current_line:
                lines.append(current_line)
                current_line = ""

            if self._fits(word, max_width, style):
                current_line = word
                continue

            logger.debug(f"Splitting word wider than {max_width:.1f}mm: '{word[:30]}'")
            pieces = self._split_word(word, max_width, style)
            lines.extend(pieces[:-1])
            current_line = pieces[-1]

        if current_line:
            lines.append(current_line)
        return lines

    def _split_word(self, word: str, max_width: float, style: StyleContext) -> List[str]:
        pieces: List[str] = []
        current = ""
        for char in word:
            if current and not self._fits(current + char, max_width, style):
                pieces.append(current)
                current = char
            else:
                current += char
        pieces.append(current)
        return pieces
