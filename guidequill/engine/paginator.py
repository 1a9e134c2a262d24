"""
Flow layout engine for guide blocks.

The paginator owns the write cursor for one render call. It walks the block
sequence once, decides before each block whether a new page must start,
computes how far each block advances the cursor and drives the draw backend.
Nothing is ever moved back onto an already committed page.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from ..exceptions import LayoutError, MediaError
from ..media.resource_registry import ResourceRegistry
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
from ..styles import style_context as styles
from ..styles.style_context import StyleContext
from .geometry import Cursor, PageGeometry

if TYPE_CHECKING:
    from ..renderers.base_renderer import DrawBackend

logger = logging.getLogger(__name__)

BULLET_GLYPH = "• "
BULLET_INDENT = 5.0

HEADING1_ADVANCE = 10.0
HEADING2_LEADING = 5.0
HEADING2_ADVANCE = 8.0

IMAGE_WIDTH = 100.0
IMAGE_HEIGHT = 60.0
IMAGE_CAPTION_GAP = 5.0
CAPTION_ADVANCE = 10.0
IMAGE_RESERVE = IMAGE_HEIGHT + CAPTION_ADVANCE
MISSING_IMAGE_ADVANCE = 10.0

PLACEHOLDER_LEADING = 5.0
PLACEHOLDER_HEIGHT = 40.0
PLACEHOLDER_PADDING = 5.0
PLACEHOLDER_TEXT_OFFSET = 20.0
PLACEHOLDER_ADVANCE = 50.0

TITLE_ADVANCE = 10.0
SOURCE_ADVANCE = 20.0


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A block that was skipped or degraded during rendering."""
    index: int
    block: Block
    message: str


class Paginator:
    """Cursor-based flow layout over a draw backend.

    Attributes:
        cursor: current page index and vertical offset
        trace: ``(page_index, y)`` after the preamble and after every block
        diagnostics: blocks that could not be rendered as written
    """

    def __init__(
        self,
        backend: DrawBackend,
        registry: Optional[ResourceRegistry] = None,
        geometry: Optional[PageGeometry] = None,
        body_style: Optional[StyleContext] = None,
    ) -> None:
        self.backend = backend
        self.registry = registry or ResourceRegistry()
        self.geometry = geometry or backend.geometry
        self.body_style = body_style or backend.body_style
        self.cursor = Cursor(page_index=0, y=self.geometry.margin)
        self.trace: List[Tuple[int, float]] = []
        self.diagnostics: List[Diagnostic] = []
        self._index = 0
        self._handlers: Dict[type, Callable[..., None]] = {
            Heading1: self._render_heading1,
            Heading2: self._render_heading2,
            BulletItem: self._render_bullet,
            ImageRef: self._render_image,
            Placeholder: self._render_placeholder,
            Paragraph: self._render_paragraph,
            Blank: self._render_blank,
        }

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def render_preamble(self, title: str, url: str) -> None:
        """Draw the document title and source line at the top of page one."""
        margin = self.geometry.margin
        try:
            self.backend.set_style(self.body_style.derive(**styles.TITLE))
            self.backend.draw_text(title, margin, self.cursor.y)
            self.cursor.advance(TITLE_ADVANCE)

            self.backend.set_style(self.body_style.derive(**styles.SOURCE_LINE))
            self.backend.draw_text(f"Source: {url}", margin, self.cursor.y)
            self.cursor.advance(SOURCE_ADVANCE)
        finally:
            self.backend.set_style(self.body_style)
        self.trace.append((self.cursor.page_index, self.cursor.y))

    def render(self, blocks: Iterable[Block]) -> None:
        for block in blocks:
            self.render_block(block)

    def render_block(self, block: Block) -> None:
        """Lay out one block, then restore the body style."""
        handler = self._handlers.get(type(block))
        if handler is None:
            raise LayoutError("Unsupported block type", type(block).__name__)

        if self.cursor.y > self.geometry.break_threshold:
            self._break_page("threshold")
        try:
            handler(block)
        finally:
            self.backend.set_style(self.body_style)
            self.trace.append((self.cursor.page_index, self.cursor.y))
            self._index += 1

    @property
    def page_count(self) -> int:
        return self.cursor.page_index + 1

    # ------------------------------------------------------------------
    # Block handlers
    # ------------------------------------------------------------------
    def _render_heading1(self, block: Heading1) -> None:
        self.backend.set_style(self.body_style.derive(**styles.HEADING1))
        self.backend.draw_text(block.text, self.geometry.margin, self.cursor.y)
        self.cursor.advance(HEADING1_ADVANCE)

    def _render_heading2(self, block: Heading2) -> None:
        self.cursor.advance(HEADING2_LEADING)
        self.backend.set_style(self.body_style.derive(**styles.HEADING2))
        self.backend.draw_text(block.text, self.geometry.margin, self.cursor.y)
        self.cursor.advance(HEADING2_ADVANCE)

    def _render_bullet(self, block: BulletItem) -> None:
        lines = self.backend.wrap_text(BULLET_GLYPH + block.text, self.geometry.usable_width)
        self._emit_wrapped(lines, self.geometry.margin + BULLET_INDENT)

    def _render_paragraph(self, block: Paragraph) -> None:
        lines = self.backend.wrap_text(block.text, self.geometry.usable_width)
        self._emit_wrapped(lines, self.geometry.margin)

    def _render_blank(self, block: Blank) -> None:
        self.cursor.advance(self.geometry.line_height / 2)

    def _render_image(self, block: ImageRef) -> None:
        resource = self.registry.lookup(block.resource_id)
        if resource is None:
            logger.debug(f"Resource '{block.resource_id}' not found, drawing fallback text")
            self.backend.set_style(self.body_style.derive(**styles.MISSING_IMAGE))
            self.backend.draw_text(f"[Image missing: {block.alt_text}]", self.geometry.margin, self.cursor.y)
            self.cursor.advance(MISSING_IMAGE_ADVANCE)
            return

        # Image and caption are placed as one unit.
        if self.cursor.y + IMAGE_RESERVE > self.geometry.bottom_limit:
            self._break_page("image")

        x = self.geometry.margin + (self.geometry.usable_width - IMAGE_WIDTH) / 2
        try:
            self.backend.draw_image(
                resource.image_data, x, self.cursor.y, IMAGE_WIDTH, IMAGE_HEIGHT,
                resource_id=block.resource_id,
            )
        except MediaError as exc:
            # TODO: draw the missing-image fallback text here instead of
            # dropping the figure and its caption without a trace on the page.
            logger.warning(f"Failed to add image '{block.resource_id}' to PDF: {exc}")
            self.diagnostics.append(Diagnostic(index=self._index, block=block, message=str(exc)))
            return

        self.cursor.advance(IMAGE_HEIGHT + IMAGE_CAPTION_GAP)
        self.backend.set_style(self.body_style.derive(**styles.CAPTION))
        self.backend.draw_centered_text(f"Figure: {block.alt_text}", self.cursor.y)
        self.cursor.advance(CAPTION_ADVANCE)

    def _render_placeholder(self, block: Placeholder) -> None:
        margin = self.geometry.margin
        width = self.geometry.usable_width
        self.cursor.advance(PLACEHOLDER_LEADING)
        self.backend.draw_rect(
            margin, self.cursor.y, width, PLACEHOLDER_HEIGHT,
            fill_color=styles.PLACEHOLDER_FILL,
            stroke_color=styles.PLACEHOLDER_STROKE,
        )
        self.backend.set_style(self.body_style.derive(**styles.PLACEHOLDER))
        lines = self.backend.wrap_text(block.caption, width - 2 * PLACEHOLDER_PADDING)
        self.backend.draw_lines(lines, margin + PLACEHOLDER_PADDING, self.cursor.y + PLACEHOLDER_TEXT_OFFSET)
        self.cursor.advance(PLACEHOLDER_ADVANCE)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _emit_wrapped(self, lines: Sequence[str], x: float) -> None:
        """Draw wrapped lines and advance one line height per line.

        A block taller than a whole page is split into page-sized chunks;
        anything shorter is drawn in one piece.
        """
        line_height = self.geometry.line_height
        if len(lines) * line_height <= self.geometry.usable_height:
            self.backend.draw_lines(lines, x, self.cursor.y)
            self.cursor.advance(len(lines) * line_height)
            return

        logger.debug(f"Splitting oversized text block of {len(lines)} lines across pages")
        remaining = list(lines)
        while remaining:
            capacity = max(1, int((self.geometry.bottom_limit - self.cursor.y) // line_height))
            chunk, remaining = remaining[:capacity], remaining[capacity:]
            self.backend.draw_lines(chunk, x, self.cursor.y)
            self.cursor.advance(len(chunk) * line_height)
            if remaining:
                self._break_page("oversized block")

    def _break_page(self, reason: str) -> None:
        self.cursor.next_page(self.geometry.margin)
        self.backend.new_page()
        logger.debug(f"Page break ({reason}): now on page {self.cursor.page_index + 1}")
