"""Base classes and interfaces for draw backends."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from ..engine.geometry import PageGeometry
from ..engine.layout_primitives import ImagePrimitive, LayoutPage, RectPrimitive, TextPrimitive
from ..engine.line_breaker import LineBreaker
from ..engine.text_metrics import TextMetricsEngine
from ..media.resource_registry import ImageData
from ..styles.style_context import RGB, StyleContext


class DrawBackend(ABC):
    """Stateful drawing surface used by the paginator.

    Primitives are drawn under the active ``StyleContext`` and recorded on
    the current ``LayoutPage``. Style changes are explicit; nothing is
    inherited or restored implicitly by the backend.
    """

    def __init__(
        self,
        geometry: PageGeometry,
        body_style: Optional[StyleContext] = None,
        metrics_engine: Optional[TextMetricsEngine] = None,
    ) -> None:
        self.geometry = geometry
        self.body_style = body_style or StyleContext.body()
        self.metrics_engine = metrics_engine or TextMetricsEngine()
        self.line_breaker = LineBreaker(self.metrics_engine)
        self.pages: List[LayoutPage] = [LayoutPage(index=0)]
        self.style: Optional[StyleContext] = None

    @property
    def current_page(self) -> LayoutPage:
        return self.pages[-1]

    @property
    def page_count(self) -> int:
        return len(self.pages)

    # ------------------------------------------------------------------
    # Style and pages
    # ------------------------------------------------------------------
    def set_style(self, style: StyleContext) -> None:
        if style == self.style:
            return
        self.style = style
        self._apply_style(style)

    def new_page(self) -> None:
        self.pages.append(LayoutPage(index=len(self.pages)))
        self._start_page()
        if self.style is not None:
            self._apply_style(self.style)

    # ------------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------------
    def draw_text(self, text: str, x: float, y: float) -> None:
        self._draw_text(text, x, y)
        self.current_page.add(TextPrimitive(text=text, x=x, y=y, style=self._active_style()))

    def draw_centered_text(self, text: str, y: float) -> float:
        """Draw ``text`` centred on the full page width; returns its x."""
        x = (self.geometry.page_width - self.measure_text_width(text)) / 2
        self.draw_text(text, x, y)
        return x

    def draw_lines(self, lines: Sequence[str], x: float, y: float) -> None:
        leading = self.metrics_engine.line_advance(self._active_style())
        for index, line in enumerate(lines):
            self.draw_text(line, x, y + index * leading)

    def draw_image(
        self,
        data: ImageData,
        x: float,
        y: float,
        width: float,
        height: float,
        resource_id: Optional[str] = None,
    ) -> None:
        """Draw an image box with its top-left corner at ``(x, y)``.

        Raises:
            MediaError: if the image data cannot be decoded or embedded
        """
        self._draw_image(data, x, y, width, height)
        self.current_page.add(
            ImagePrimitive(x=x, y=y, width=width, height=height, resource_id=resource_id)
        )

    def draw_rect(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        fill_color: Optional[RGB] = None,
        stroke_color: Optional[RGB] = None,
    ) -> None:
        self._draw_rect(x, y, width, height, fill_color, stroke_color)
        self.current_page.add(
            RectPrimitive(
                x=x, y=y, width=width, height=height,
                fill_color=fill_color, stroke_color=stroke_color,
            )
        )

    # ------------------------------------------------------------------
    # Metrics
    # ------------------------------------------------------------------
    def measure_text_width(self, text: str) -> float:
        return self.metrics_engine.measure_text(text, self._active_style())

    def wrap_text(self, text: str, max_width: float) -> List[str]:
        return self.line_breaker.break_text(text, max_width, self._active_style())

    def _active_style(self) -> StyleContext:
        return self.style or self.body_style

    # ------------------------------------------------------------------
    # Backend hooks
    # ------------------------------------------------------------------
    @abstractmethod
    def finish(self) -> bytes:
        """Finalize the document and return its bytes."""

    @abstractmethod
    def _apply_style(self, style: StyleContext) -> None:
        ...

    @abstractmethod
    def _start_page(self) -> None:
        ...

    @abstractmethod
    def _draw_text(self, text: str, x: float, y: float) -> None:
        ...

    @abstractmethod
    def _draw_image(self, data: ImageData, x: float, y: float, width: float, height: float) -> None:
        ...

    @abstractmethod
    def _draw_rect(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        fill_color: Optional[RGB],
        stroke_color: Optional[RGB],
    ) -> None:
        ...
