"""Invoicing use cases"""
from .generate_invoice import GenerateInvoice
from .dtos import (
    ProductDTO,
    GenerateInvoiceCommandDTO,
    InvoiceLineDTO,
    InvoiceDocumentResponseDTO,
)

__all__ = [
    "GenerateInvoice",
    "ProductDTO",
    "GenerateInvoiceCommandDTO",
    "InvoiceLineDTO",
    "InvoiceDocumentResponseDTO",
]
