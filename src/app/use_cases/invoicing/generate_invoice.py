"""GenerateInvoice Use Case

Builds an Invoice from a command and renders it to a PDF.
"""

import logging
from datetime import datetime

from config import ApplicationConfig
from src.app.services.invoice_renderer import InvoiceRenderer
from src.app.services.reference_data import ReferenceDataProvider
from src.domain.invoice import Invoice
from .dtos import GenerateInvoiceCommandDTO, InvoiceDocumentResponseDTO, InvoiceLineDTO

logger = logging.getLogger(__name__)


class GenerateInvoice:
    """
    Use Case: Generate an invoice document

    Business Rules:
    1. Products are added before payment info
    2. Taxed products require a VAT id
    3. Identical products are merged into one row with a quantity
    4. Returns PDF as base64-encoded string

    Flow:
    1. Create invoice with identity fields and locale
    2. Set seller, buyer and currency
    3. Add products
    4. Set footer / payment info
    5. Render and build response

    Domain errors (InvoiceError subclasses) propagate to the caller.
    """

    def __init__(
        self,
        reference_data: ReferenceDataProvider,
        renderer: InvoiceRenderer,
    ):
        self.reference_data = reference_data
        self.renderer = renderer

    def execute(self, command: GenerateInvoiceCommandDTO) -> InvoiceDocumentResponseDTO:
        """
        Execute invoice generation

        Args:
            command: GenerateInvoiceCommandDTO with parties, products and settings

        Returns:
            InvoiceDocumentResponseDTO with totals, finalized lines and the PDF
        """
        logger.info(f"Generating invoice {command.invoice_id}")

        # Step 1: Create invoice
        invoice = Invoice(
            invoice_id=command.invoice_id,
            invoice_date=command.invoice_date,
            invoice_due_date=command.invoice_due_date,
            vat_id=command.vat_id,
            locale=command.locale or ApplicationConfig.DEFAULT_LOCALE,
            reference_data=self.reference_data,
        )

        # Step 2: Parties and currency
        seller, buyer = command.seller, command.buyer
        invoice.set_seller(seller.name, seller.street, seller.zip, seller.city, seller.country)
        invoice.set_buyer(buyer.name, buyer.street, buyer.zip, buyer.city, buyer.country)
        invoice.set_currency(command.currency)

        # Step 3: Products
        for product in command.products:
            invoice.add_product(
                product.description,
                product.net_price,
                product.tax_rate,
                product.gross_price,
            )

        # Step 4: Payment info and footer, composed in one set_footer call
        payment = command.payment_info
        footer = command.footer_text or ""
        if payment is not None:
            invoice.set_payment_info(
                payment.iban,
                payment.account_name,
                payment.bic,
                payment.bank_name,
                add_to_footer=False,
            )
            if command.add_payment_to_footer:
                footer += ApplicationConfig.FOOTER_LINE_BREAK + payment.footer_line(
                    ApplicationConfig.PAYMENT_INFO_DELIMITER
                )
        invoice.set_footer(footer)

        # Step 5: Render
        pdf_base64 = invoice.render(self.renderer)

        line_dtos = [
            InvoiceLineDTO(
                description=item.description,
                quantity=item.quantity,
                net_price=item.net_price,
                gross_price=item.gross_price,
                tax_rate=item.tax_rate,
                net_total=item.net_total,
                gross_total=item.gross_total,
            )
            for item in invoice.items
        ]

        return InvoiceDocumentResponseDTO(
            invoice_id=invoice.invoice_id,
            currency=invoice.currency.code,
            net_sum=invoice.net_sum,
            gross_sum=invoice.gross_sum,
            balance_due=invoice.balance_due,
            line_items=line_dtos,
            pdf_base64=pdf_base64,
            generated_at=datetime.utcnow(),
        )
