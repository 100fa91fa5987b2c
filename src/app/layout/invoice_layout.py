"""Invoice Layout

Translates a validated, finalized Invoice into an ordered list of drawing
instructions for a fixed single-page A4 layout. Every section sits at a
hardcoded vertical offset; wrapped text is not reflowed.
"""

from typing import List
from reportlab.lib.pagesizes import A4

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
from src.domain.invoice import Invoice

# ─── Page metrics (points, top-left origin) ─────────────────────
PAGE_WIDTH, PAGE_HEIGHT = A4
MARGIN = 50
RULE_LEFT = 50
RULE_RIGHT = 550

FONT_REGULAR = "Helvetica"
FONT_BOLD = "Helvetica-Bold"

# ─── Section offsets ─────────────────────────────────────────────
CUSTOMER_INFORMATION_TOP = 197
INVOICE_TABLE_TOP = 325
TABLE_ROW_HEIGHT = 30
FOOTER_TOP = 735
FOOTER_LINE_HEIGHT = 15
FOOTER_WIDTH = 500


def right_aligned_width(x: float) -> float:
    """Width from x to the right margin"""
    return PAGE_WIDTH - MARGIN - x


class InvoiceLayout:
    """
    Layout for one invoice

    Usage:
        instructions = InvoiceLayout(invoice).build()
    """

    def __init__(self, invoice: Invoice):
        self.invoice = invoice
        self._instructions: List[Instruction] = []

    def build(self) -> List[Instruction]:
        self._instructions = []
        self._generate_header()
        self._generate_customer_information()
        self._generate_invoice_table()
        self._generate_footer()
        return list(self._instructions)

    def _emit(self, *instructions: Instruction) -> None:
        self._instructions.extend(instructions)

    def _text(self, text: str, x: float, y: float, **options) -> None:
        self._emit(DrawText(text=text, x=x, y=y, **options))

    def _right(self, text: str, x: float, y: float) -> None:
        self._text(text, x, y, width=right_aligned_width(x), align="right")

    def _generate_header(self) -> None:
        invoice = self.invoice
        seller = invoice.seller

        self._emit(
            SetFillColor(color=ApplicationConfig.ACCENT_COLOR),
            SetFontSize(size=20),
            SetFont(name=FONT_BOLD),
        )
        self._text(seller.name, 50, 57)
        self._emit(SetFont(name=FONT_REGULAR), SetFontSize(size=10))
        self._right(seller.name, 200, 50)
        self._right(seller.street, 200, 65)
        self._right(f"{seller.city} {seller.zip}, {seller.country}", 200, 80)
        self._right(f"{invoice.translate('VatId')}: {invoice.vat_id or ''}", 200, 95)
        self._emit(MoveDown())

    def _generate_customer_information(self) -> None:
        invoice = self.invoice
        buyer = invoice.buyer
        top = CUSTOMER_INFORMATION_TOP

        self._emit(SetFillColor(color=ApplicationConfig.ACCENT_COLOR), SetFontSize(size=20))
        self._text(invoice.translate("Invoice"), 50, 160)

        self._generate_hr(183)

        self._emit(SetFontSize(size=10))
        self._text(invoice.translate("InvoiceNr"), 50, top)
        self._emit(SetFont(name=FONT_BOLD))
        self._text(invoice.invoice_id, 150, top)
        self._emit(SetFont(name=FONT_REGULAR))
        self._text(invoice.translate("InvoiceDate"), 50, top + 15)
        self._text(invoice.format_date(invoice.invoice_date), 150, top + 15)
        self._text(f"{invoice.translate('BalanceDue')}:", 50, top + 30)
        self._text(invoice.format_currency(invoice.balance_due), 150, top + 30)

        self._emit(SetFont(name=FONT_BOLD))
        self._text(buyer.name, 300, top)
        self._emit(SetFont(name=FONT_REGULAR))
        self._text(buyer.street, 300, top + 21)
        self._text(f"{buyer.zip}, {buyer.city}, {buyer.country}", 300, top + 32)
        self._emit(MoveDown())

        self._generate_hr(250)

    def _generate_invoice_table(self) -> None:
        invoice = self.invoice
        top = INVOICE_TABLE_TOP

        self._emit(SetFont(name=FONT_BOLD))
        self._generate_table_row(
            top,
            invoice.translate("Item"),
            invoice.translate("Net"),
            invoice.translate("Total"),
        )
        self._generate_hr(top + 20)
        self._emit(SetFont(name=FONT_REGULAR))

        rows = invoice.items
        for i, item in enumerate(rows):
            position = top + (i + 1) * TABLE_ROW_HEIGHT
            self._generate_table_row(
                position,
                f"{item.quantity}x {item.description}",
                invoice.format_currency(item.net_total),
                invoice.format_currency(item.gross_total),
            )
            self._generate_hr(position + 20)

        subtotal_position = top + (len(rows) + 1) * TABLE_ROW_HEIGHT
        self._emit(SetFont(name=FONT_BOLD))
        self._generate_table_row(
            subtotal_position,
            invoice.translate("Sum"),
            invoice.format_currency(invoice.net_sum),
            invoice.format_currency(invoice.gross_sum),
        )
        self._emit(SetFont(name=FONT_REGULAR))

    def _generate_footer(self) -> None:
        y = FOOTER_TOP
        for line in self.invoice.footer_lines:
            self._emit(SetFontSize(size=10))
            self._text(line, 50, y, width=FOOTER_WIDTH, align="center")
            y += FOOTER_LINE_HEIGHT

    def _generate_table_row(self, y: float, title: str, unit_cost: str, line_total: str) -> None:
        self._emit(SetFontSize(size=10))
        self._text(title, 50, y)
        self._text(unit_cost, 390, y, width=90, align="right")
        self._right(line_total, 0, y)

    def _generate_hr(self, y: float) -> None:
        self._emit(
            SetStrokeColor(color=ApplicationConfig.RULE_COLOR),
            SetLineWidth(width=1),
            DrawLine(x1=RULE_LEFT, y1=y, x2=RULE_RIGHT, y2=y),
        )
