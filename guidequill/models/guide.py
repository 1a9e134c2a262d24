"""Guide input models handed over by the content generation stage."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Union


@dataclass(slots=True)
class Screenshot:
    """Captured screenshot entry.

    ``data`` is either raw image bytes or a base64 data URI
    (``data:image/jpeg;base64,...``) as produced by the crawl stage.
    """
    id: str
    description: str
    data: Union[bytes, str]


@dataclass(slots=True)
class GeneratedGuide:
    """Finished guide: markdown content plus metadata and screenshots."""
    content: str
    url: str
    title: str = "User Guide"
    timestamp: Optional[Union[datetime, str, int]] = None
    screenshots: List[Screenshot] = field(default_factory=list)

    def lines(self) -> List[str]:
        """Split content into the raw line sequence consumed by the engine."""
        return self.content.split("\n")
