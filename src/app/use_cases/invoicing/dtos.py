"""Data Transfer Objects for Invoicing Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field

from src.domain.party import Party, PaymentInfo


class ProductDTO(BaseModel):
    """
    One product addition

    Identical (description, tax_rate, net_price) additions are merged into
    one row with a quantity when the invoice is rendered.
    """

    description: str = Field(
        ...,
        description="Product description"
    )

    net_price: Decimal = Field(
        ...,
        description="Net price per unit"
    )

    tax_rate: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        description="Tax rate in percent (0 = untaxed)"
    )

    gross_price: Decimal = Field(
        ...,
        description="Gross price per unit"
    )


class GenerateInvoiceCommandDTO(BaseModel):
    """
    Command DTO for generating an invoice document

    Used as input to GenerateInvoice use case.
    """

    invoice_id: str = Field(
        ...,
        description="Invoice number printed on the document"
    )

    invoice_date: date = Field(
        ...,
        description="Date the invoice was created"
    )

    invoice_due_date: Optional[date] = Field(
        default=None,
        description="Date the invoice is due"
    )

    vat_id: Optional[str] = Field(
        default=None,
        description="Seller VAT id, required when any product is taxed"
    )

    locale: Optional[str] = Field(
        default=None,
        description="Locale for labels (defaults to ApplicationConfig.DEFAULT_LOCALE)"
    )

    currency: str = Field(
        ...,
        description="Currency code (e.g., EUR), case-insensitive"
    )

    seller: Party
    buyer: Party

    products: List[ProductDTO] = Field(
        ...,
        min_length=1,
        description="Products in the order they were added"
    )

    payment_info: Optional[PaymentInfo] = Field(
        default=None,
        description="Bank details, appended to the footer when add_payment_to_footer is set"
    )

    add_payment_to_footer: bool = Field(
        default=True,
        description="Append the payment line to the footer"
    )

    footer_text: Optional[str] = Field(
        default=None,
        description="Extra footer text after the tax notice, before the payment line"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "invoice_id": "2024-001",
                "invoice_date": "2024-03-05",
                "invoice_due_date": "2024-03-19",
                "vat_id": "ATU12345678",
                "locale": "en",
                "currency": "eur",
                "seller": {
                    "name": "Acme Consulting",
                    "street": "Main Street 1",
                    "zip": "1010",
                    "city": "Vienna",
                    "country": "Austria",
                },
                "buyer": {
                    "name": "Globex",
                    "street": "Ring 5",
                    "zip": "8010",
                    "city": "Graz",
                    "country": "Austria",
                },
                "products": [
                    {"description": "Consulting hour", "net_price": "100", "tax_rate": "20", "gross_price": "120"}
                ],
            }
        }


class InvoiceLineDTO(BaseModel):
    """Finalized line item as printed on the invoice"""

    description: str
    quantity: int
    net_price: Decimal
    gross_price: Decimal
    tax_rate: Decimal
    net_total: Decimal
    gross_total: Decimal


class InvoiceDocumentResponseDTO(BaseModel):
    """
    Response DTO for invoice generation

    Returned by GenerateInvoice use case.
    """

    invoice_id: str = Field(
        ...,
        description="Invoice number"
    )

    currency: str = Field(
        ...,
        description="Currency code"
    )

    net_sum: Decimal = Field(
        ...,
        description="Sum of all net prices added"
    )

    gross_sum: Decimal = Field(
        ...,
        description="Sum of all gross prices added"
    )

    balance_due: Decimal = Field(
        ...,
        description="Gross sum minus amount already paid"
    )

    line_items: List[InvoiceLineDTO] = Field(
        ...,
        description="Finalized (de-duplicated) line items"
    )

    pdf_base64: str = Field(
        ...,
        description="Rendered PDF as base64 string"
    )

    generated_at: datetime = Field(
        ...,
        description="Generation timestamp"
    )
