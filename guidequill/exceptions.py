"""Custom exceptions for guidequill."""

from typing import Optional


class GuideQuillError(Exception):
    """Base exception for guidequill errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ParsingError(GuideQuillError):
    """Exception raised while reading guide input."""

    pass


class LayoutError(GuideQuillError):
    """Exception raised during layout calculation."""

    pass


class RenderingError(GuideQuillError):
    """Exception raised by a draw backend."""

    pass


class MediaError(GuideQuillError):
    """Exception raised while decoding or embedding image data."""

    pass


class ConfigError(GuideQuillError):
    """Exception raised for invalid render configuration."""

    pass
