"""ReportLab PDF Generation Service Implementation

Implements the drawing sink using the ReportLab canvas.
"""

import logging
from io import BytesIO
from typing import Optional, Sequence

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfgen import canvas

from config import ApplicationConfig
from src.app.layout.instructions import (
    DrawLine,
    DrawText,
    Instruction,
    MoveDown,
    SetFillColor,
    SetFont,
    SetFontSize,
    SetLineWidth,
    SetStrokeColor,
)
from src.app.services.pdf_service import PdfService

logger = logging.getLogger(__name__)


class ReportLabPdfService(PdfService):
    """
    ReportLab implementation of PdfService

    Replays top-left based instructions on an A4 canvas. ReportLab's origin
    is bottom-left and text is positioned by baseline, so a text's y is
    converted to PAGE_H - y - ascent.
    """

    def __init__(self, compress: Optional[bool] = None):
        """
        Initialize the service

        Args:
            compress: Compress page streams (defaults to ApplicationConfig.PDF_COMPRESS)
        """
        self.compress = ApplicationConfig.PDF_COMPRESS if compress is None else compress

    def build_document(
        self,
        instructions: Sequence[Instruction],
        title: Optional[str] = None,
        author: Optional[str] = None,
    ) -> bytes:
        buffer = BytesIO()
        page_height = A4[1]
        c = canvas.Canvas(buffer, pagesize=A4, pageCompression=1 if self.compress else 0)
        if title:
            c.setTitle(title)
        if author:
            c.setAuthor(author)

        state = _CanvasState(c, page_height)
        for instruction in instructions:
            state.apply(instruction)

        c.showPage()
        c.save()
        pdf_bytes = buffer.getvalue()
        buffer.close()

        logger.debug(f"Built PDF from {len(instructions)} instructions ({len(pdf_bytes)} bytes)")
        return pdf_bytes


class _CanvasState:
    """Current font while replaying instructions"""

    def __init__(self, c: canvas.Canvas, page_height: float):
        self.canvas = c
        self.page_height = page_height
        self.font_name = "Helvetica"
        self.font_size = 12.0
        self.canvas.setFont(self.font_name, self.font_size)

    def apply(self, instruction: Instruction) -> None:
        c = self.canvas
        if isinstance(instruction, SetFillColor):
            c.setFillColor(colors.HexColor(instruction.color))
        elif isinstance(instruction, SetStrokeColor):
            c.setStrokeColor(colors.HexColor(instruction.color))
        elif isinstance(instruction, SetLineWidth):
            c.setLineWidth(instruction.width)
        elif isinstance(instruction, SetFont):
            self.font_name = instruction.name
            c.setFont(self.font_name, self.font_size)
        elif isinstance(instruction, SetFontSize):
            self.font_size = instruction.size
            c.setFont(self.font_name, self.font_size)
        elif isinstance(instruction, DrawText):
            self._draw_text(instruction)
        elif isinstance(instruction, DrawLine):
            c.line(
                instruction.x1,
                self.page_height - instruction.y1,
                instruction.x2,
                self.page_height - instruction.y2,
            )
        elif isinstance(instruction, MoveDown):
            pass  # texts carry absolute coordinates, nothing reads the cursor
        else:
            raise TypeError(f"Unsupported drawing instruction: {type(instruction).__name__}")

    def _draw_text(self, instruction: DrawText) -> None:
        c = self.canvas
        ascent = pdfmetrics.getAscent(self.font_name, self.font_size)
        baseline = self.page_height - instruction.y - ascent

        if instruction.align == "right" and instruction.width is not None:
            c.drawRightString(instruction.x + instruction.width, baseline, instruction.text)
        elif instruction.align == "center" and instruction.width is not None:
            c.drawCentredString(instruction.x + instruction.width / 2, baseline, instruction.text)
        else:
            c.drawString(instruction.x, baseline, instruction.text)

