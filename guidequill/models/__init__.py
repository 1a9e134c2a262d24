"""Data models for guide rendering."""

from .block import (
    Block,
    Blank,
    BulletItem,
    Heading1,
    Heading2,
    ImageRef,
    Paragraph,
    Placeholder,
)
from .guide import GeneratedGuide, Screenshot

__all__ = [
    "Block",
    "Blank",
    "BulletItem",
    "Heading1",
    "Heading2",
    "ImageRef",
    "Paragraph",
    "Placeholder",
    "GeneratedGuide",
    "Screenshot",
]
