"""Unit tests for reference data providers"""

import json
import pytest
from datetime import date
from unittest.mock import MagicMock

from src.adapter.services.reference_data import (
    JsonReferenceDataProvider,
    StaticReferenceDataProvider,
    create_reference_data_provider,
)
from src.domain.invoice import Invoice


@pytest.fixture
def static_provider():
    return StaticReferenceDataProvider(
        currencies={
            "eur": {"symbol": "€", "symbol_native": "€", "decimal_digits": 2, "rounding": 0},
        },
        translations={"en": {"Invoice": "Invoice"}},
    )


class TestStaticReferenceDataProvider:

    def test_lookup_currency(self, static_provider):
        currency = static_provider.lookup_currency("EUR")

        assert currency.code == "EUR"
        assert currency.symbol == "€"
        assert currency.decimal_digits == 2

    def test_unknown_currency_returns_none(self, static_provider):
        assert static_provider.lookup_currency("USD") is None

    def test_minimal_currency_record(self):
        """A record with only symbol and decimal_digits is enough to format amounts"""
        provider = StaticReferenceDataProvider(
            currencies={"EUR": {"symbol": "€", "decimal_digits": 2}},
            translations={"en": {}},
        )
        invoice = Invoice("2024-001", date(2024, 3, 5), None, None, "en", provider)

        invoice.set_currency("eur")

        assert invoice.currency.symbol_native is None
        assert invoice.format_currency(5) == "€5.00"

    def test_lookup_translation(self, static_provider):
        assert static_provider.lookup_translation("en", "Invoice") == "Invoice"
        assert static_provider.lookup_translation("en", "Missing") is None
        assert static_provider.lookup_translation("de", "Invoice") is None

    def test_locales(self, static_provider):
        assert static_provider.locales() == ["en"]


class TestJsonReferenceDataProvider:
    """Test the packaged tables"""

    def test_packaged_tables(self):
        provider = JsonReferenceDataProvider()

        assert provider.locales() == ["de", "en"]
        assert provider.lookup_currency("USD").symbol == "$"
        assert provider.lookup_currency("HUF").decimal_digits == 0
        assert provider.lookup_translation("de", "InvoiceNr") == "Rechnungsnummer"

    def test_every_locale_has_the_same_keys(self):
        provider = JsonReferenceDataProvider()
        tables = provider._translations

        assert set(tables["de"]) == set(tables["en"])

    def test_custom_directory(self, tmp_path):
        # Arrange
        (tmp_path / "currencies.json").write_text(
            json.dumps({"CHF": {"symbol": "CHF ", "symbol_native": "CHF", "decimal_digits": 2}}),
            encoding="utf-8",
        )
        (tmp_path / "translations.json").write_text(
            json.dumps({"fr": {"Invoice": "Facture"}}), encoding="utf-8"
        )

        # Act
        provider = JsonReferenceDataProvider(str(tmp_path))

        # Assert
        assert provider.lookup_currency("chf").symbol == "CHF "
        assert provider.lookup_translation("fr", "Invoice") == "Facture"

    def test_missing_directory_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            JsonReferenceDataProvider(str(tmp_path / "missing"))


class TestCreateReferenceDataProvider:

    def test_defaults_to_packaged_tables(self):
        config = MagicMock()
        config.REFERENCE_DATA_DIR = None

        provider = create_reference_data_provider(config)

        assert provider.lookup_currency("EUR") is not None

    def test_uses_configured_directory(self, tmp_path):
        (tmp_path / "currencies.json").write_text("{}", encoding="utf-8")
        (tmp_path / "translations.json").write_text('{"it": {}}', encoding="utf-8")
        config = MagicMock()
        config.REFERENCE_DATA_DIR = str(tmp_path)

        provider = create_reference_data_provider(config)

        assert provider.locales() == ["it"]
        assert provider.lookup_currency("EUR") is None
