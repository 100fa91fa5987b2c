"""Invoice layout: drawing instructions and the fixed A4 page layout"""
from .instructions import (
    Instruction,
    SetFillColor,
    SetStrokeColor,
    SetLineWidth,
    SetFont,
    SetFontSize,
    DrawText,
    DrawLine,
    MoveDown,
)
from .invoice_layout import InvoiceLayout

__all__ = [
    "Instruction",
    "SetFillColor",
    "SetStrokeColor",
    "SetLineWidth",
    "SetFont",
    "SetFontSize",
    "DrawText",
    "DrawLine",
    "MoveDown",
    "InvoiceLayout",
]
