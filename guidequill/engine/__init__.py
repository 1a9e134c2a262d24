"""Layout engine: geometry, text metrics and pagination."""

from .geometry import Cursor, PageGeometry
from .layout_primitives import ImagePrimitive, LayoutPage, RectPrimitive, TextPrimitive
from .line_breaker import LineBreaker
from .paginator import Diagnostic, Paginator
from .text_metrics import TextMetricsEngine

__all__ = [
    "Cursor",
    "PageGeometry",
    "ImagePrimitive",
    "LayoutPage",
    "RectPrimitive",
    "TextPrimitive",
    "LineBreaker",
    "Diagnostic",
    "Paginator",
    "TextMetricsEngine",
]
