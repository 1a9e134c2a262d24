"""
High-level API for rendering generated guides to PDF.

Example:
    from guidequill import GeneratedGuide, render_guide

    guide = GeneratedGuide(content=markdown, url="https://example.com")
    result = render_guide(guide)
    Path(result.filename).write_bytes(result.pdf_bytes)
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .config import RenderConfig
from .engine.layout_primitives import LayoutPage
from .engine.paginator import Diagnostic, Paginator
from .exceptions import ParsingError
from .media.resource_registry import ResourceRegistry
from .models.guide import GeneratedGuide, Screenshot
from .parser.block_classifier import classify_lines
from .renderers.pdf_renderer import PdfDrawBackend
from .styles.style_context import StyleContext

logger = logging.getLogger(__name__)

FILENAME_PREFIX = "User_Guide_"
FILENAME_SUFFIX = ".pdf"

Timestamp = Union[datetime, str, int, None]


@dataclass(slots=True)
class RenderResult:
    """Rendered artifact plus per-block diagnostics."""
    pdf_bytes: bytes
    filename: str
    page_count: int
    pages: List[LayoutPage] = field(default_factory=list)
    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.diagnostics


def timestamp_millis(timestamp: Timestamp = None) -> int:
    """Milliseconds since the epoch for a guide timestamp.

    Accepts a datetime, an ISO 8601 string (``Z`` suffix allowed), an integer
    number of milliseconds, or ``None`` for the current time.
    """
    if timestamp is None:
        return int(time.time() * 1000)
    if isinstance(timestamp, bool):
        raise ParsingError("Invalid timestamp", repr(timestamp))
    if isinstance(timestamp, int):
        return timestamp
    if isinstance(timestamp, datetime):
        return int(timestamp.timestamp() * 1000)
    if isinstance(timestamp, str):
        value = timestamp.strip()
        if value.endswith("Z"):
            value = value[:-1] + "+00:00"
        try:
            return int(datetime.fromisoformat(value).timestamp() * 1000)
        except ValueError as exc:
            raise ParsingError("Invalid ISO timestamp", timestamp) from exc
    raise ParsingError("Unsupported timestamp type", type(timestamp).__name__)


def suggested_filename(timestamp: Timestamp = None) -> str:
    return f"{FILENAME_PREFIX}{timestamp_millis(timestamp)}{FILENAME_SUFFIX}"


def render_guide(guide: GeneratedGuide, config: Optional[RenderConfig] = None) -> RenderResult:
    """Render a finished guide into a PDF document.

    Missing screenshots and images that fail to embed never abort the
    render; they are reported in ``RenderResult.diagnostics``.
    """
    config = config or RenderConfig()
    geometry = config.geometry()
    body_style = StyleContext.body(family=config.body_font, size=config.body_size)

    registry = ResourceRegistry.from_screenshots(guide.screenshots)
    blocks = classify_lines(guide.lines())

    backend = PdfDrawBackend(geometry, body_style=body_style)
    backend.set_document_info(title=guide.title, subject=guide.url)

    paginator = Paginator(backend, registry, geometry, body_style)
    paginator.render_preamble(guide.title, guide.url)
    paginator.render(blocks)
    pdf_bytes = backend.finish()

    logger.info(
        f"Rendered guide for {guide.url}: {len(blocks)} blocks, "
        f"{backend.page_count} pages, {len(paginator.diagnostics)} skipped"
    )
    return RenderResult(
        pdf_bytes=pdf_bytes,
        filename=suggested_filename(guide.timestamp),
        page_count=backend.page_count,
        pages=backend.pages,
        diagnostics=paginator.diagnostics,
    )


def render_markdown(
    content: str,
    url: str = "",
    screenshots: Iterable[Screenshot] = (),
    title: str = "User Guide",
    timestamp: Timestamp = None,
    config: Optional[RenderConfig] = None,
) -> RenderResult:
    guide = GeneratedGuide(
        content=content,
        url=url,
        title=title,
        timestamp=timestamp,
        screenshots=list(screenshots),
    )
    return render_guide(guide, config)


def save_guide(
    guide: GeneratedGuide,
    output_dir: Union[str, Path] = ".",
    config: Optional[RenderConfig] = None,
) -> Path:
    """Render ``guide`` and write it under its suggested filename."""
    result = render_guide(guide, config)
    output_path = Path(output_dir) / result.filename
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(result.pdf_bytes)
    return output_path
