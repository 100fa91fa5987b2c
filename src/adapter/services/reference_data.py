"""Reference Data Provider Implementations

Provides currency and translation tables from memory or JSON files.
"""

import json
import logging
import os
from typing import Any, Dict, List, Optional

from config import ApplicationConfig
from src.app.services.reference_data import ReferenceDataProvider
from src.domain.currency import Currency

logger = logging.getLogger(__name__)

DEFAULT_DATA_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "data")
CURRENCIES_FILE = "currencies.json"
TRANSLATIONS_FILE = "translations.json"


class StaticReferenceDataProvider(ReferenceDataProvider):
    """
    Reference data held in in-memory tables

    Tables have the shape of the JSON files:
        currencies:   {"EUR": {"symbol": "€", "symbol_native": "€", "decimal_digits": 2, ...}}
        translations: {"en": {"Invoice": "Invoice", ...}}
    """

    def __init__(
        self,
        currencies: Dict[str, Dict[str, Any]],
        translations: Dict[str, Dict[str, str]],
    ):
        self._currencies = {code.upper(): record for code, record in currencies.items()}
        self._translations = translations

    def lookup_currency(self, code: str) -> Optional[Currency]:
        record = self._currencies.get(code.upper())
        if record is None:
            return None
        return Currency(**{"code": code.upper(), **record})

    def lookup_translation(self, locale: str, key: str) -> Optional[str]:
        table = self._translations.get(locale)
        if table is None:
            return None
        return table.get(key)

    def locales(self) -> List[str]:
        return sorted(self._translations)


class JsonReferenceDataProvider(StaticReferenceDataProvider):
    """
    Reference data loaded from currencies.json and translations.json

    Files are read once when the provider is created.
    """

    def __init__(self, directory: str = DEFAULT_DATA_DIR):
        """
        Initialize from a directory

        Args:
            directory: Directory containing currencies.json and translations.json
        """
        self.directory = directory
        currencies = self._load(CURRENCIES_FILE)
        translations = self._load(TRANSLATIONS_FILE)
        super().__init__(currencies=currencies, translations=translations)

        logger.debug(
            f"Loaded {len(currencies)} currencies and {len(translations)} locales from {directory}"
        )

    def _load(self, filename: str) -> Dict[str, Any]:
        path = os.path.join(self.directory, filename)
        with open(path, "r", encoding="utf-8") as r_file:
            return json.load(r_file)


def create_reference_data_provider(config=ApplicationConfig) -> ReferenceDataProvider:
    """
    Factory function to create the configured reference data provider

    Args:
        config: Application configuration

    Returns:
        JsonReferenceDataProvider reading REFERENCE_DATA_DIR, or the packaged tables
    """
    directory = getattr(config, "REFERENCE_DATA_DIR", None) or DEFAULT_DATA_DIR
    return JsonReferenceDataProvider(directory)
