"""
Catalog and sales file upload endpoints
"""

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import PlainTextResponse
import logging

from bookrank.core.config import Settings
from bookrank.core.database import Database, get_database, get_settings
from bookrank.ingestion import CatalogIngestor, SalesIngestor
from bookrank.services.uploads import saved_upload

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/upload", response_class=PlainTextResponse)
def upload_catalog(
    file: UploadFile = File(...),
    database: Database = Depends(get_database),
    settings: Settings = Depends(get_settings),
):
    """
    Load a semicolon-delimited catalog file into the books table
    """
    ingestor = CatalogIngestor(
        database,
        chunk_size=settings.CSV_CHUNK_SIZE,
        upsert=settings.CATALOG_UPSERT,
    )
    with saved_upload(file, settings.UPLOAD_DIR) as path:
        report = ingestor.ingest(path)
    return report.summary("Catalog")


@router.post("/upload-sales", response_class=PlainTextResponse)
def upload_sales(
    file: UploadFile = File(...),
    database: Database = Depends(get_database),
    settings: Settings = Depends(get_settings),
):
    """
    Append a semicolon-delimited sales file to the sales ledger
    """
    ingestor = SalesIngestor(database, chunk_size=settings.CSV_CHUNK_SIZE)
    with saved_upload(file, settings.UPLOAD_DIR) as path:
        report = ingestor.ingest(path)
    return report.summary("Sales")
