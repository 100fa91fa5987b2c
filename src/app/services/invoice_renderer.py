"""Invoice Renderer

Glues the invoice layout to a PdfService drawing sink.
"""

from src.app.layout.invoice_layout import InvoiceLayout
from src.app.services.pdf_service import PdfService
from src.domain.invoice import Invoice


class InvoiceRenderer:
    """
    Renders a finalized invoice through a PdfService

    Usage:
        renderer = InvoiceRenderer(ReportLabPdfService())
        pdf_base64 = invoice.render(renderer)
    """

    def __init__(self, pdf_service: PdfService):
        self.pdf_service = pdf_service

    def render(self, invoice: Invoice) -> bytes:
        instructions = InvoiceLayout(invoice).build()
        return self.pdf_service.build_document(
            instructions,
            title=f"{invoice.translate('Invoice')} {invoice.invoice_id}",
            author=invoice.seller.name if invoice.seller else None,
        )
