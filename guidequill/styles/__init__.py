"""Typography: built-in fonts and the style context."""

from .font_utils import normalize_family, resolve_font_variant
from .style_context import StyleContext

__all__ = ["StyleContext", "normalize_family", "resolve_font_variant"]
