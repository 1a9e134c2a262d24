"""Draw primitives recorded per page during layout."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from ..styles.style_context import RGB, StyleContext


@dataclass(frozen=True, slots=True)
class TextPrimitive:
    text: str
    x: float
    y: float
    style: StyleContext


@dataclass(frozen=True, slots=True)
class ImagePrimitive:
    x: float
    y: float
    width: float
    height: float
    resource_id: Optional[str] = None


@dataclass(frozen=True, slots=True)
class RectPrimitive:
    x: float
    y: float
    width: float
    height: float
    fill_color: Optional[RGB] = None
    stroke_color: Optional[RGB] = None


Primitive = Union[TextPrimitive, ImagePrimitive, RectPrimitive]


@dataclass(slots=True)
class LayoutPage:
    """Append-only list of primitives committed to one page."""
    index: int
    primitives: List[Primitive] = field(default_factory=list)

    def add(self, primitive: Primitive) -> None:
        self.primitives.append(primitive)

    @property
    def texts(self) -> List[TextPrimitive]:
        return [p for p in self.primitives if isinstance(p, TextPrimitive)]

    @property
    def images(self) -> List[ImagePrimitive]:
        return [p for p in self.primitives if isinstance(p, ImagePrimitive)]

    @property
    def rects(self) -> List[RectPrimitive]:
        return [p for p in self.primitives if isinstance(p, RectPrimitive)]

    def text_content(self) -> List[str]:
        return [p.text for p in self.texts]

    def extent(self) -> Tuple[float, float]:
        """Smallest and largest ``y`` used on the page."""
        ys = [p.y for p in self.primitives]
        if not ys:
            return (0.0, 0.0)
        return (min(ys), max(ys))
