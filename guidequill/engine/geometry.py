"""Geometry primitives for flow layout.

Layout coordinates are millimetres with the origin at the top-left corner of
the page; ``y`` grows downwards. Backends convert to their own units.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PageGeometry:
    """Fixed page geometry and pagination thresholds."""
    page_width: float = 210.0
    page_height: float = 297.0
    margin: float = 20.0
    line_height: float = 7.0
    break_threshold: float = 270.0
    bottom_limit: float = 280.0

    @property
    def usable_width(self) -> float:
        return self.page_width - 2 * self.margin

    @property
    def usable_height(self) -> float:
        """Vertical span available to a text block on a fresh page."""
        return self.bottom_limit - self.margin


@dataclass(slots=True)
class Cursor:
    """Write position: page index and vertical offset on that page."""
    page_index: int = 0
    y: float = 20.0

    def advance(self, dy: float) -> None:
        self.y += dy

    def next_page(self, margin: float) -> None:
        self.page_index += 1
        self.y = margin
