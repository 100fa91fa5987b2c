from .pdf_service import ReportLabPdfService
from .reference_data import (
    StaticReferenceDataProvider,
    JsonReferenceDataProvider,
    create_reference_data_provider,
)

__all__ = [
    "ReportLabPdfService",
    "StaticReferenceDataProvider",
    "JsonReferenceDataProvider",
    "create_reference_data_provider",
]
