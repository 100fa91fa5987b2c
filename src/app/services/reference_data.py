"""Reference Data Provider Interface

Defines the contract for looking up currencies and translations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from src.domain.currency import Currency


class ReferenceDataProvider(ABC):
    """
    Service interface for invoice reference data

    Implementations can be backed by:
    - Static in-memory tables
    - JSON files
    - A database or remote service
    """

    @abstractmethod
    def lookup_currency(self, code: str) -> Optional[Currency]:
        """
        Look up a currency by its code

        Args:
            code: Upper-case ISO 4217 code (e.g., "EUR")

        Returns:
            Currency if known, None otherwise
        """
        pass

    @abstractmethod
    def lookup_translation(self, locale: str, key: str) -> Optional[str]:
        """
        Look up a translated text

        Args:
            locale: Locale key (e.g., "en", "de")
            key: Translation key (e.g., "InvoiceNr")

        Returns:
            Translated text, None if the locale or key is unknown
        """
        pass

    @abstractmethod
    def locales(self) -> List[str]:
        """Return the locale keys this provider has tables for"""
        pass
