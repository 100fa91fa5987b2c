"""Invoice Domain Errors

All errors are raised synchronously to the caller of the failing operation.
"""


class InvoiceError(Exception):
    """Base class for invoice errors, carries a machine readable code"""

    code = "INVOICE_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class LocaleNotSetError(InvoiceError):
    """Translation requested while no locale is configured"""

    code = "LOCALE_NOT_SET"


class TranslationKeyNotFoundError(InvoiceError):
    """Translation key missing from the locale table"""

    code = "TRANSLATION_KEY_NOT_FOUND"

    def __init__(self, locale: str, key: str):
        super().__init__(f"No translation for key '{key}' in locale '{locale}'")
        self.locale = locale
        self.key = key


class CurrencyNotFoundError(InvoiceError):
    """Unknown currency code"""

    code = "CURRENCY_NOT_FOUND"

    def __init__(self, currency_code: str):
        super().__init__(f"Unable to find currency '{currency_code}'")
        self.currency_code = currency_code


class CurrencyNotSetError(InvoiceError):
    """Currency formatting attempted before set_currency"""

    code = "CURRENCY_NOT_SET"


class InvalidStateError(InvoiceError):
    """Operation called out of order (e.g. payment info before products)"""

    code = "INVALID_STATE"


class MissingTaxIdError(InvoiceError):
    """Invoice contains taxed items but no VAT id"""

    code = "MISSING_TAX_ID"


class InvalidDateError(InvoiceError):
    """A non-date value was supplied where a date is required"""

    code = "INVALID_DATE"
