import pytest
from datetime import date
from unittest.mock import MagicMock

from src.adapter.services.reference_data import JsonReferenceDataProvider
from src.app.services.invoice_renderer import InvoiceRenderer
from src.domain.invoice import Invoice


@pytest.fixture
def reference_data():
    """Reference data provider backed by the packaged tables"""
    return JsonReferenceDataProvider()


@pytest.fixture
def sample_pdf_bytes():
    """Sample PDF bytes for testing"""
    return b"%PDF-1.4\nTest PDF content"


@pytest.fixture
def mock_pdf_service(sample_pdf_bytes):
    """Mock PDF service capturing the drawing instructions"""
    service = MagicMock()
    service.build_document = MagicMock(return_value=sample_pdf_bytes)
    return service


@pytest.fixture
def renderer(mock_pdf_service):
    """InvoiceRenderer with mocked PDF service"""
    return InvoiceRenderer(mock_pdf_service)


@pytest.fixture
def invoice(reference_data):
    """English invoice with seller, buyer and EUR, no products yet"""
    invoice = Invoice(
        invoice_id="2024-001",
        invoice_date=date(2024, 3, 5),
        invoice_due_date=date(2024, 3, 19),
        vat_id=None,
        locale="en",
        reference_data=reference_data,
    )
    invoice.set_seller("Acme Consulting", "Main Street 1", "1010", "Vienna", "Austria")
    invoice.set_buyer("Globex", "Ring 5", "8010", "Graz", "Austria")
    invoice.set_currency("eur")
    return invoice
