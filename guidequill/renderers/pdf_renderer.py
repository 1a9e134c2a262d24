"""ReportLab draw backend producing an in-memory PDF."""

from __future__ import annotations

import logging
from io import BytesIO
from typing import Optional

from reportlab.lib.utils import ImageReader
from reportlab.pdfgen.canvas import Canvas

from ..engine.geometry import PageGeometry
from ..engine.text_metrics import TextMetricsEngine
from ..exceptions import MediaError, RenderingError
from ..media.resource_registry import ImageData, decode_image_data
from ..styles.style_context import RGB, StyleContext
from .base_renderer import DrawBackend
from .render_utils import flip_y, to_color, to_points

logger = logging.getLogger(__name__)


class PdfDrawBackend(DrawBackend):
    """Draw backend on a ReportLab ``Canvas``.

    The canvas is created with ``invariant=1`` so the same input always
    produces byte-identical output.
    """

    def __init__(
        self,
        geometry: PageGeometry,
        body_style: Optional[StyleContext] = None,
        metrics_engine: Optional[TextMetricsEngine] = None,
    ) -> None:
        super().__init__(geometry, body_style, metrics_engine)
        self._buffer = BytesIO()
        self.canvas = Canvas(
            self._buffer,
            pagesize=(to_points(geometry.page_width), to_points(geometry.page_height)),
            invariant=1,
        )
        self._finished = False
        self.set_style(self.body_style)

    def set_document_info(self, title: str, subject: str = "", creator: str = "guidequill") -> None:
        self.canvas.setTitle(title)
        self.canvas.setSubject(subject)
        self.canvas.setCreator(creator)

    def finish(self) -> bytes:
        if self._finished:
            raise RenderingError("PDF document already finalized")
        self.canvas.save()
        self._finished = True
        pdf_bytes = self._buffer.getvalue()
        logger.debug(f"PDF finalized: {self.page_count} pages, {len(pdf_bytes)} bytes")
        return pdf_bytes

    def _apply_style(self, style: StyleContext) -> None:
        self.canvas.setFont(style.font_name, style.size)
        self.canvas.setFillColor(to_color(style.color))

    def _start_page(self) -> None:
        self.canvas.showPage()

    def _draw_text(self, text: str, x: float, y: float) -> None:
        self.canvas.drawString(to_points(x), flip_y(y, self.geometry.page_height), text)

    def _draw_image(self, data: ImageData, x: float, y: float, width: float, height: float) -> None:
        image_bytes = decode_image_data(data)
        try:
            image = ImageReader(BytesIO(image_bytes))
            self.canvas.drawImage(
                image,
                to_points(x),
                flip_y(y + height, self.geometry.page_height),
                width=to_points(width),
                height=to_points(height),
                mask="auto",
            )
        except Exception as exc:
            raise MediaError("Failed to embed image", str(exc)) from exc

    def _draw_rect(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        fill_color: Optional[RGB],
        stroke_color: Optional[RGB],
    ) -> None:
        self.canvas.saveState()
        if fill_color is not None:
            self.canvas.setFillColor(to_color(fill_color))
        if stroke_color is not None:
            self.canvas.setStrokeColor(to_color(stroke_color))
        self.canvas.rect(
            to_points(x),
            flip_y(y + height, self.geometry.page_height),
            to_points(width),
            to_points(height),
            stroke=1 if stroke_color is not None else 0,
            fill=1 if fill_color is not None else 0,
        )
        self.canvas.restoreState()
