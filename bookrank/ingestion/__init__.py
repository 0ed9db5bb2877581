"""
Ingestion pipeline for uploaded catalog and sales files.

Modules:
    cleaning  — date / quantity / text normalization
    columns   — expected headers
    base      — shared chunked row loop and IngestionReport
"""

from .base import DelimitedIngestor, IngestionReport, RowRejected, RowRejection
from .catalog_ingestor import CatalogIngestor
from .sales_ingestor import SalesIngestor

__all__ = [
    "DelimitedIngestor", "IngestionReport", "RowRejected", "RowRejection",
    "CatalogIngestor", "SalesIngestor",
]
