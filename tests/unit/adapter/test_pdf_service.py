"""Unit tests for ReportLabPdfService"""

import pytest
from unittest.mock import patch

from src.adapter.services.pdf_service import ReportLabPdfService
from src.app.layout.instructions import (
    DrawLine,
    DrawText,
    MoveDown,
    SetFillColor,
    SetFont,
    SetFontSize,
    SetLineWidth,
    SetStrokeColor,
)


@pytest.fixture
def instructions():
    return [
        SetFillColor(color="#444444"),
        SetFontSize(size=20),
        SetFont(name="Helvetica-Bold"),
        DrawText(text="Acme Consulting", x=50, y=57),
        SetFont(name="Helvetica"),
        SetFontSize(size=10),
        DrawText(text="Main Street 1", x=200, y=65, width=345.28, align="right"),
        MoveDown(),
        SetStrokeColor(color="#aaaaaa"),
        SetLineWidth(width=1),
        DrawLine(x1=50, y1=183, x2=550, y2=183),
        DrawText(text="Thank you", x=50, y=735, width=500, align="center"),
    ]


class TestReportLabPdfService:

    def test_build_document_returns_pdf(self, instructions):
        pdf_bytes = ReportLabPdfService().build_document(instructions, title="Invoice 1", author="Acme")

        assert pdf_bytes.startswith(b"%PDF")
        assert b"%%EOF" in pdf_bytes[-32:]

    def test_empty_instructions_give_blank_page(self):
        pdf_bytes = ReportLabPdfService(compress=True).build_document([])

        assert pdf_bytes.startswith(b"%PDF")

    def test_unknown_instruction_raises(self):
        with pytest.raises(TypeError):
            ReportLabPdfService().build_document([object()])

    @patch("src.adapter.services.pdf_service.canvas.Canvas")
    def test_text_alignment_and_coordinates(self, mock_canvas_cls):
        # Arrange
        c = mock_canvas_cls.return_value
        service = ReportLabPdfService()

        # Act
        service.build_document([
            SetFont(name="Helvetica"),
            SetFontSize(size=10),
            DrawText(text="left", x=50, y=100),
            DrawText(text="right", x=390, y=100, width=90, align="right"),
            DrawText(text="center", x=50, y=100, width=500, align="center"),
            DrawLine(x1=50, y1=183, x2=550, y2=183),
        ])

        # Assert
        left_x, left_y, left_text = c.drawString.call_args.args
        assert (left_x, left_text) == (50, "left")
        assert left_y < 841.89 - 100
        right_x, right_y, _ = c.drawRightString.call_args.args
        assert right_x == 480
        assert right_y == left_y
        center_x, _, _ = c.drawCentredString.call_args.args
        assert center_x == 300
        x1, y1, x2, y2 = c.line.call_args.args
        assert (x1, x2) == (50, 550)
        assert y1 == y2 == pytest.approx(841.8897637795277 - 183)
        c.save.assert_called_once()
