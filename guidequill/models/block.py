"""Typed blocks produced by line classification.

Each input line of a guide maps to exactly one block. Blocks are immutable
values; all layout state lives in the paginator.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class Heading1:
    text: str


@dataclass(frozen=True, slots=True)
class Heading2:
    text: str


@dataclass(frozen=True, slots=True)
class BulletItem:
    text: str


@dataclass(frozen=True, slots=True)
class ImageRef:
    """Markdown image reference ``![alt](resource_id)``."""
    alt_text: str
    resource_id: str


@dataclass(frozen=True, slots=True)
class Placeholder:
    """Screenshot placeholder such as ``[SCREENSHOT: login form]``."""
    caption: str


@dataclass(frozen=True, slots=True)
class Paragraph:
    text: str


@dataclass(frozen=True, slots=True)
class Blank:
    pass


Block = Union[Heading1, Heading2, BulletItem, ImageRef, Placeholder, Paragraph, Blank]
