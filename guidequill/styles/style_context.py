"""Typography state applied to draw primitives."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Tuple

from .font_utils import resolve_font_variant

RGB = Tuple[int, int, int]

BLACK: RGB = (0, 0, 0)
GRAY: RGB = (100, 100, 100)
PLACEHOLDER_FILL: RGB = (240, 240, 240)
PLACEHOLDER_STROKE: RGB = (200, 200, 200)

BASE_FAMILY = "Helvetica"
MONO_FAMILY = "Courier"
BODY_SIZE = 11.0


@dataclass(frozen=True, slots=True)
class StyleContext:
    """Font family, weight, slant, point size and 0-255 RGB text colour."""
    family: str = BASE_FAMILY
    bold: bool = False
    italic: bool = False
    size: float = BODY_SIZE
    color: RGB = BLACK

    @classmethod
    def body(cls, family: str = BASE_FAMILY, size: float = BODY_SIZE) -> "StyleContext":
        return cls(family=family, size=size)

    @property
    def font_name(self) -> str:
        return resolve_font_variant(self.family, self.bold, self.italic)

    def derive(self, **changes) -> "StyleContext":
        return replace(self, **changes)


# Block typography, derived from the body style at render time.
HEADING1 = dict(bold=True, size=18.0)
HEADING2 = dict(bold=True, size=14.0)
TITLE = dict(bold=True, size=22.0)
SOURCE_LINE = dict(bold=True, size=14.0, color=GRAY)
CAPTION = dict(italic=True, size=9.0, color=GRAY)
MISSING_IMAGE = dict(family=MONO_FAMILY, size=9.0)
PLACEHOLDER = dict(family=MONO_FAMILY, size=9.0, color=GRAY)
