from .currency import Currency
from .party import Party, PaymentInfo
from .line_item import LineItem
from .ledger import LineItemLedger
from .invoice import Invoice
from .errors import (
    InvoiceError,
    LocaleNotSetError,
    TranslationKeyNotFoundError,
    CurrencyNotFoundError,
    CurrencyNotSetError,
    InvalidStateError,
    MissingTaxIdError,
    InvalidDateError,
)

__all__ = [
    "Currency",
    "Party",
    "PaymentInfo",
    "LineItem",
    "LineItemLedger",
    "Invoice",
    "InvoiceError",
    "LocaleNotSetError",
    "TranslationKeyNotFoundError",
    "CurrencyNotFoundError",
    "CurrencyNotSetError",
    "InvalidStateError",
    "MissingTaxIdError",
    "InvalidDateError",
]
