"""Invoice Domain Aggregate

Holds identity, parties, currency, footer, payment details and the line-item
ledger of a single invoice, and drives validation and rendering.
"""

import base64
import logging
from datetime import date, datetime
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import TYPE_CHECKING, List, Optional, Union

from config import ApplicationConfig
from src.domain.currency import Currency
from src.domain.errors import (
    CurrencyNotFoundError,
    CurrencyNotSetError,
    InvalidDateError,
    InvalidStateError,
    LocaleNotSetError,
    MissingTaxIdError,
    TranslationKeyNotFoundError,
)
from src.domain.ledger import LineItemLedger
from src.domain.line_item import LineItem, Number, to_decimal
from src.domain.party import Party, PaymentInfo

if TYPE_CHECKING:
    from src.app.services.invoice_renderer import InvoiceRenderer
    from src.app.services.reference_data import ReferenceDataProvider

logger = logging.getLogger(__name__)

MISSING_TRANSLATION = "No translation"
TWO_PLACES = Decimal("0.01")


def _coerce_date(value: Union[date, str, None], field_name: str, required: bool = True) -> Optional[date]:
    if value is None and not required:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value)
        except ValueError:
            pass
    raise InvalidDateError(f"{field_name} must be a date, got {value!r}")


class Invoice:
    """
    Invoice - Aggregate root for one invoice document

    Domain Rules:
    - net_equals_gross starts True and flips to False for good once a
      product with tax_rate > 0 is added
    - Payment info can only be set after at least one product
    - Rendering requires a VAT id when taxed products exist
    - Rendering finalizes the ledger (dedup + quantity) right before layout

    Lifecycle:
        invoice = Invoice("2024-001", date(2024, 3, 5), date(2024, 3, 19), "ATU123", "en", provider)
        invoice.set_seller(...)
        invoice.set_buyer(...)
        invoice.set_currency("eur")
        invoice.add_product("Consulting", 100, 20, 120)
        invoice.set_payment_info(...)
        pdf_base64 = invoice.render(renderer)
    """

    def __init__(
        self,
        invoice_id: str,
        invoice_date: Union[date, str],
        invoice_due_date: Union[date, str, None],
        vat_id: Optional[str],
        locale: Optional[str],
        reference_data: "ReferenceDataProvider",
    ):
        """
        Create a new invoice

        Args:
            invoice_id: ID of invoice
            invoice_date: Date the invoice was created (date or ISO string)
            invoice_due_date: Date the invoice is due (date, ISO string or None)
            vat_id: VAT id of the seller, required when taxed items exist
            locale: Locale key for translations ("de", "en", ...)
            reference_data: Provider for currencies and translations
        """
        self.invoice_id = invoice_id
        self.invoice_date = _coerce_date(invoice_date, "invoice_date")
        self.invoice_due_date = _coerce_date(invoice_due_date, "invoice_due_date", required=False)
        self.vat_id = vat_id
        self.locale = locale

        self._reference_data = reference_data
        self._ledger = LineItemLedger()
        self._footer_text = ""
        self._currency: Optional[Currency] = None
        self._paid = Decimal("0")
        self._payment_info: Optional[PaymentInfo] = None

        self.seller: Optional[Party] = None
        self.buyer: Optional[Party] = None

    # ── Parties ──────────────────────────────────────────────────

    def set_seller(self, name: str, street: str, zip: str, city: str, country: str) -> None:
        self.seller = Party(name=name, street=street, zip=zip, city=city, country=country)

    def set_buyer(self, name: str, street: str, zip: str, city: str, country: str) -> None:
        self.buyer = Party(name=name, street=street, zip=zip, city=city, country=country)

    # ── Reference data ───────────────────────────────────────────

    def translate(self, key: str) -> str:
        """
        Get the translated text for key in the invoice locale

        Raises:
            LocaleNotSetError: no locale configured
            TranslationKeyNotFoundError: key (or locale) unknown and
                STRICT_TRANSLATIONS is enabled
        """
        if not self.locale:
            raise LocaleNotSetError("No locale is set for translations")

        translated = self._reference_data.lookup_translation(self.locale, key)
        if translated is None:
            if ApplicationConfig.STRICT_TRANSLATIONS:
                raise TranslationKeyNotFoundError(self.locale, key)
            logger.warning(f"Missing translation for '{key}' in locale '{self.locale}'")
            return MISSING_TRANSLATION
        return translated

    def set_currency(self, code: str) -> None:
        """
        Set currency of invoice

        Args:
            code: Currency code ("eur", "usd", "gbp", ...), case-insensitive
        """
        code = code.upper()
        currency = self._reference_data.lookup_currency(code)
        if currency is None:
            raise CurrencyNotFoundError(code)
        self._currency = currency

    @property
    def currency(self) -> Optional[Currency]:
        return self._currency

    # ── Footer & payment ─────────────────────────────────────────

    def set_footer(self, text: str) -> None:
        """Replace the footer with the tax notice boilerplate followed by text"""
        if self.net_equals_gross:
            self._footer_text = self.translate("NetEqualsGrossText")
        else:
            self._footer_text = self.translate("DefaultFooterText")

        self._footer_text += text

    @property
    def footer_text(self) -> str:
        return self._footer_text

    @property
    def footer_lines(self) -> List[str]:
        return self._footer_text.split(ApplicationConfig.FOOTER_LINE_BREAK)

    def set_payment_info(
        self,
        iban: str,
        account_name: str,
        bic: str,
        bank_name: str,
        add_to_footer: bool = True,
    ) -> None:
        """
        Set payment information

        Args:
            iban: IBAN
            account_name: Account holder name
            bic: BIC
            bank_name: Name of bank
            add_to_footer: Append a payment line to the footer

        Raises:
            InvalidStateError: called before any product was added
        """
        if self._ledger.is_empty:
            raise InvalidStateError("Please add products before setting payment info")

        self._payment_info = PaymentInfo(
            iban=iban, account_name=account_name, bic=bic, bank_name=bank_name
        )

        if add_to_footer:
            self.set_footer(
                ApplicationConfig.FOOTER_LINE_BREAK
                + self._payment_info.footer_line(ApplicationConfig.PAYMENT_INFO_DELIMITER)
            )

    @property
    def payment_info(self) -> Optional[PaymentInfo]:
        return self._payment_info

    # ── Products & sums ──────────────────────────────────────────

    def add_product(
        self,
        description: str,
        net_price: Number,
        tax_rate: Number,
        gross_price: Number,
    ) -> None:
        """
        Add a product to the invoice

        Args:
            description: Title of product
            net_price: Net price per unit
            tax_rate: Tax rate in percent
            gross_price: Gross price per unit
        """
        self._ledger.add(description, net_price, tax_rate, gross_price)

    @property
    def net_equals_gross(self) -> bool:
        return not self._ledger.has_taxed_items

    @property
    def items(self) -> List[LineItem]:
        return self._ledger.rows

    @property
    def net_sum(self) -> Decimal:
        return self._ledger.net_sum

    @property
    def gross_sum(self) -> Decimal:
        return self._ledger.gross_sum

    @property
    def paid(self) -> Decimal:
        return self._paid

    @property
    def balance_due(self) -> Decimal:
        return self.gross_sum - self._paid

    # ── Formatting ───────────────────────────────────────────────

    def format_currency(self, amount: Number) -> str:
        """
        Format an amount with the currency symbol and exactly two decimals

        Example: 2.12001 -> "€2.12"
        """
        if self._currency is None:
            raise CurrencyNotSetError("Currency must be set before formatting amounts")
        value = to_decimal(amount)
        with localcontext() as ctx:
            # every integer digit plus two decimals must fit the precision
            ctx.prec = max(ctx.prec, value.adjusted() + 3)
            value = value.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
        return f"{self._currency.symbol}{value}"

    def format_date(self, value: date) -> str:
        """
        Format a date as day.month.year without zero padding

        Example: date(2024, 3, 5) -> "5.3.2024"
        """
        if not isinstance(value, date):
            raise InvalidDateError(f"Please supply a date object, got {value!r}")
        return f"{value.day}.{value.month}.{value.year}"

    # ── Rendering ────────────────────────────────────────────────

    def validate(self) -> None:
        """Run checks that must pass before any drawing happens"""
        if not self.net_equals_gross and not self.vat_id:
            raise MissingTaxIdError("This invoice contains VAT, please include a valid VAT id")
        if self._currency is None:
            raise CurrencyNotSetError("Currency must be set before rendering")
        if self.seller is None or self.buyer is None:
            raise InvalidStateError("Seller and buyer must be set before rendering")

    def render_bytes(self, renderer: "InvoiceRenderer") -> bytes:
        """Validate, finalize the ledger and render the document as PDF bytes"""
        self.validate()
        self._ledger.finalize()

        logger.info(f"Rendering invoice {self.invoice_id} with {len(self.items)} rows")
        pdf_bytes = renderer.render(self)
        logger.info(f"Rendered invoice {self.invoice_id} ({len(pdf_bytes)} bytes)")
        return pdf_bytes

    def render(self, renderer: "InvoiceRenderer") -> str:
        """
        Generate the invoice document

        Call this at the end of the invoice's lifecycle.

        Returns:
            PDF document as base64 string
        """
        return base64.b64encode(self.render_bytes(renderer)).decode("utf-8")
