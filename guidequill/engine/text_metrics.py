"""
TextMetricsEngine - text width measurement for layout.

Uses ReportLab's AFM metrics for the standard fonts and reports widths in
layout units (millimetres).
"""

from __future__ import annotations

from reportlab.lib.units import mm
from reportlab.pdfbase import pdfmetrics

from ..styles.style_context import StyleContext

# Leading used when a backend draws several lines in one call
LINE_SPACING_FACTOR = 1.15


class TextMetricsEngine:
    """Engine for calculating text metrics in millimetres."""

    def measure_text(self, text: str, style: StyleContext) -> float:
        """Width of ``text`` rendered with ``style``."""
        if not text:
            return 0.0
        return pdfmetrics.stringWidth(text, style.font_name, style.size) / mm

    def line_advance(self, style: StyleContext) -> float:
        """Baseline-to-baseline distance for multi-line text."""
        return style.size * LINE_SPACING_FACTOR / mm
