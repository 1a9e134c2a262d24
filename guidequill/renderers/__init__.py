"""Draw backends."""

from .base_renderer import DrawBackend
from .pdf_renderer import PdfDrawBackend

__all__ = ["DrawBackend", "PdfDrawBackend"]
