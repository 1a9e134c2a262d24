"""
guidequill - render generated user guides to paginated PDF documents.

The engine reads a restricted markdown dialect (headings, bullets,
paragraphs, screenshot references and placeholders) together with a
registry of captured screenshots and lays it out across fixed-size pages:

- Block classifier: one typed block per input line
- Paginator: cursor-based flow layout with page-break thresholds
- Draw backend: ReportLab canvas with an explicit style context

Quick Start:
    from guidequill import GeneratedGuide, render_guide

    result = render_guide(GeneratedGuide(content=text, url="https://example.com"))
    open(result.filename, "wb").write(result.pdf_bytes)
"""

from .version import __version__, __version_info__

from .exceptions import (
    GuideQuillError,
    ParsingError,
    LayoutError,
    RenderingError,
    MediaError,
    ConfigError,
)
from .config import RenderConfig
from .models import GeneratedGuide, Screenshot
from .media import ResourceRegistry
from .parser import classify_line, classify_lines
from .engine import Paginator, PageGeometry
from .renderers import PdfDrawBackend
from .api import (
    RenderResult,
    render_guide,
    render_markdown,
    save_guide,
    suggested_filename,
)

__all__ = [
    "__version__",
    "__version_info__",
    "GuideQuillError",
    "ParsingError",
    "LayoutError",
    "RenderingError",
    "MediaError",
    "ConfigError",
    "RenderConfig",
    "GeneratedGuide",
    "Screenshot",
    "ResourceRegistry",
    "classify_line",
    "classify_lines",
    "Paginator",
    "PageGeometry",
    "PdfDrawBackend",
    "RenderResult",
    "render_guide",
    "render_markdown",
    "save_guide",
    "suggested_filename",
]
