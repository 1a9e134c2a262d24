"""Input parsing for guide markdown."""

from .block_classifier import classify_line, classify_lines

__all__ = ["classify_line", "classify_lines"]
