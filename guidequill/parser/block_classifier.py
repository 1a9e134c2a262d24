"""Line classification for the guide markdown dialect.

The dialect is deliberately small. Checks run in a fixed order and the first
match wins, so a line such as ``# Intro [SCREENSHOT: x]`` is a heading, not a
placeholder.
"""

from __future__ import annotations

import re
from typing import Iterable, List

from ..models.block import (
    Blank,
    Block,
    BulletItem,
    Heading1,
    Heading2,
    ImageRef,
    Paragraph,
    Placeholder,
)

IMAGE_PATTERN = re.compile(r"!\[(.*?)\]\((.*?)\)")
PLACEHOLDER_MARKER = "[SCREENSHOT"
_BRACKETS = re.compile(r"[\[\]]")


def _placeholder_caption(line: str) -> str:
    return _BRACKETS.sub("", line).replace("SCREENSHOT:", "", 1).strip()


def classify_line(line: str) -> Block:
    """Return the block for a single raw line. Never fails."""
    match = IMAGE_PATTERN.fullmatch(line)
    if match:
        return ImageRef(alt_text=match.group(1), resource_id=match.group(2))
    if line.startswith("# "):
        return Heading1(line.replace("# ", "", 1))
    if line.startswith("## "):
        return Heading2(line.replace("## ", "", 1))
    if line.startswith("* ") or line.startswith("- "):
        return BulletItem(line[2:])
    if PLACEHOLDER_MARKER in line:
        return Placeholder(_placeholder_caption(line))
    if not line.strip():
        return Blank()
    return Paragraph(line)


def classify_lines(lines: Iterable[str]) -> List[Block]:
    return [classify_line(line) for line in lines]
