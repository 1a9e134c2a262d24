"""Render configuration."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping

from reportlab.lib.pagesizes import A4, LETTER
from reportlab.lib.units import mm

from .engine.geometry import PageGeometry
from .exceptions import ConfigError
from .styles.font_utils import normalize_family

PAGE_SIZES = {
    "A4": A4,
    "LETTER": LETTER,
}


@dataclass(slots=True)
class RenderConfig:
    """Configuration for a single render call.

    Defaults reproduce the reference layout: A4, 20 mm margin, 7 mm lines,
    break when ``y > 270`` and keep images above ``280``.
    """
    page_size: str = "A4"
    margin: float = 20.0
    line_height: float = 7.0
    break_threshold: float = 270.0
    bottom_limit: float = 280.0
    body_font: str = "Helvetica"
    body_size: float = 11.0

    def __post_init__(self) -> None:
        self.validate()

    @classmethod
    def from_dict(cls, options: Mapping[str, Any]) -> "RenderConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise ConfigError("Unknown render options", ", ".join(unknown))
        return cls(**dict(options))

    def validate(self) -> None:
        if self.page_size.upper() not in PAGE_SIZES:
            raise ConfigError("Unsupported page size preset", self.page_size)
        for name in ("margin", "line_height", "body_size"):
            if getattr(self, name) <= 0:
                raise ConfigError(f"'{name}' must be positive", str(getattr(self, name)))
        if not self.margin < self.break_threshold <= self.bottom_limit:
            raise ConfigError(
                "Thresholds must satisfy margin < break_threshold <= bottom_limit",
                f"{self.margin} / {self.break_threshold} / {self.bottom_limit}",
            )
        page_height = self.page_dimensions()[1]
        if self.bottom_limit > page_height:
            raise ConfigError(
                "bottom_limit must lie on the page",
                f"{self.bottom_limit} > {page_height} ({self.page_size})",
            )
        normalize_family(self.body_font)

    def page_dimensions(self) -> tuple[float, float]:
        """Page width and height in millimetres."""
        width, height = PAGE_SIZES[self.page_size.upper()]
        return round(width / mm, 2), round(height / mm, 2)

    def geometry(self) -> PageGeometry:
        width, height = self.page_dimensions()
        return PageGeometry(
            page_width=width,
            page_height=height,
            margin=self.margin,
            line_height=self.line_height,
            break_threshold=self.break_threshold,
            bottom_limit=self.bottom_limit,
        )
