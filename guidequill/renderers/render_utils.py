"""Utility helpers shared across renderer components."""

from __future__ import annotations

from typing import Optional, Tuple

from reportlab.lib import colors
from reportlab.lib.colors import Color
from reportlab.lib.units import mm

RGB = Tuple[int, int, int]


def to_color(value: Optional[RGB], fallback: RGB = (0, 0, 0)) -> Color:
    """Convert a 0-255 RGB triple into a ReportLab colour."""
    red, green, blue = value if value is not None else fallback
    return colors.Color(red / 255.0, green / 255.0, blue / 255.0)


def to_points(value: float) -> float:
    return value * mm


def flip_y(y: float, page_height: float) -> float:
    """Top-down millimetre offset to a bottom-up PDF point coordinate."""
    return (page_height - y) * mm
