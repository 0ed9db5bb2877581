"""
Catalog Ingestor — Loads book metadata from a catalog file.

Expected header:
    isbn13;titulo;autor;editorial;texto_bic_materia_destacada

Fields are stored as given. A repeated ISBN is rejected by the primary
key unless the ingestor runs in upsert mode, where the stored book is
replaced by the new row.
"""

from __future__ import annotations

from sqlalchemy.orm import Session

from bookrank.core.database import Database
from bookrank.models.book import Book

from .base import DelimitedIngestor
from .cleaning import clean_identifier, clean_text
from .columns import CATALOG_COLUMNS


class CatalogIngestor(DelimitedIngestor):

    REQUIRED_COLUMNS = CATALOG_COLUMNS
    RECORD_NAME = "book"

    def __init__(
        self,
        database: Database,
        chunk_size: int = 500,
        upsert: bool = False,
    ):
        super().__init__(database, chunk_size=chunk_size)
        self.upsert = upsert

    def build_record(self, row: dict[str, str]) -> Book:
        return Book(
            isbn13=clean_identifier(row.get("isbn13")),
            title=clean_text(row.get("titulo")),
            author=clean_text(row.get("autor")),
            publisher=clean_text(row.get("editorial")),
            featured_subject=clean_text(row.get("texto_bic_materia_destacada")),
        )

    def write(self, session: Session, record: Book) -> None:
        if self.upsert:
            session.merge(record)
        else:
            session.add(record)

    def describe(self, record: Book) -> str:
        return f"{record.isbn13} ({record.title})"
