from .reference_data import ReferenceDataProvider
from .pdf_service import PdfService
from .invoice_renderer import InvoiceRenderer

__all__ = [
    "ReferenceDataProvider",
    "PdfService",
    "InvoiceRenderer",
]
