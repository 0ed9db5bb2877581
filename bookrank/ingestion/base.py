"""
Delimited Ingestor — Shared row loop for catalog and sales uploads.

Reads a semicolon-delimited file with pandas in chunks, turns each row
into a model instance and stores it in its own transaction. A bad row is
logged and skipped; only stream-level problems abort the upload.
"""

from __future__ import annotations

import functools
import logging
import os
from dataclasses import dataclass, field
from typing import BinaryIO, Iterator, Union

import pandas as pd
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from bookrank.core.database import Database
from bookrank.core.errors import IngestionError
from bookrank.models.base import Base

from .columns import missing_columns, normalize_header

logger = logging.getLogger(__name__)


class RowRejected(ValueError):
    """A single input row failed validation."""


@dataclass
class RowRejection:
    """
    row_number is the 1-based position among the data rows pandas parsed,
    not the physical file line. Lines pandas dropped for a wrong field
    count are not numbered and carry None.
    """

    row_number: int | None
    reason: str


@dataclass
class IngestionReport:
    """Outcome of one ingestion run."""

    source: str
    inserted: int = 0
    rejections: list[RowRejection] = field(default_factory=list)

    @property
    def rejected(self) -> int:
        return len(self.rejections)

    @property
    def total(self) -> int:
        return self.inserted + self.rejected

    def reject(self, row_number: int | None, reason: str) -> None:
        self.rejections.append(RowRejection(row_number, reason))

    def summary(self, label: str) -> str:
        return (
            f"{label} file processed: {self.inserted} rows stored, "
            f"{self.rejected} rows rejected"
        )


class DelimitedIngestor:
    """
    Base class for one record type.

    Subclasses set REQUIRED_COLUMNS and implement build_record();
    write() may be overridden to change how a record is persisted.
    """

    REQUIRED_COLUMNS: tuple[str, ...] = ()
    RECORD_NAME = "row"

    def __init__(self, database: Database, chunk_size: int = 500, delimiter: str = ";"):
        self.database = database
        self.chunk_size = chunk_size
        self.delimiter = delimiter

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def ingest(self, source: Union[str, BinaryIO]) -> IngestionReport:
        """
        Consume *source* to the end and store every valid row.

        Args:
            source: A file path or a binary file-like object.

        Returns:
            An IngestionReport with inserted / rejected counts.

        Raises:
            IngestionError: the file cannot be read or lacks a required column.
        """
        report = IngestionReport(source=self._source_name(source))

        for row_number, row in enumerate(self._iter_rows(source, report), start=1):
            try:
                record = self.build_record(row)
            except RowRejected as exc:
                self._reject(report, row_number, str(exc))
                continue
            self._store(record, row_number, report)

        logger.info(
            "Ingested %s: %d %s rows stored, %d rejected",
            report.source, report.inserted, self.RECORD_NAME, report.rejected,
        )
        return report

    def build_record(self, row: dict[str, str]) -> Base:
        raise NotImplementedError

    def write(self, session: Session, record: Base) -> None:
        session.add(record)

    def describe(self, record: Base) -> str:
        return repr(record)

    # ------------------------------------------------------------------
    # Internal: Reading
    # ------------------------------------------------------------------

    def _iter_rows(self, source, report: IngestionReport) -> Iterator[dict[str, str]]:
        on_bad_line = functools.partial(self._on_bad_line, report)
        try:
            reader = pd.read_csv(
                source,
                sep=self.delimiter,
                dtype=str,
                keep_default_na=False,
                encoding="utf-8-sig",
                engine="python",
                on_bad_lines=on_bad_line,
                chunksize=self.chunk_size,
            )
            with reader:
                checked = False
                for chunk in reader:
                    chunk.columns = [normalize_header(c) for c in chunk.columns]
                    if not checked:
                        self._check_columns(chunk.columns)
                        checked = True
                    yield from chunk.fillna("").to_dict(orient="records")
        except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError, OSError) as exc:
            raise IngestionError(f"Could not read {report.source}: {exc}") from exc

    def _check_columns(self, columns) -> None:
        missing = missing_columns(columns, self.REQUIRED_COLUMNS)
        if missing:
            raise IngestionError(
                f"Missing required column(s): {', '.join(missing)}; "
                f"expected header {self.delimiter.join(self.REQUIRED_COLUMNS)}"
            )

    def _on_bad_line(self, report: IngestionReport, fields: list[str]) -> None:
        # Returning None tells pandas to drop the line
        self._reject(report, None, f"unexpected number of fields: {fields!r}")
        return None

    # ------------------------------------------------------------------
    # Internal: Storing
    # ------------------------------------------------------------------

    def _store(self, record: Base, row_number: int, report: IngestionReport) -> None:
        try:
            with self.database.session() as session:
                self.write(session, record)
        except (SQLAlchemyError, OverflowError) as exc:
            self._reject(report, row_number, str(getattr(exc, "orig", None) or exc))
            return

        report.inserted += 1
        logger.info("Stored %s from data row %d: %s", self.RECORD_NAME, row_number, self.describe(record))

    @staticmethod
    def _reject(report: IngestionReport, row_number: int | None, reason: str) -> None:
        report.reject(row_number, reason)
        if row_number is None:
            logger.warning("Rejected unparsed line: %s", reason)
        else:
            logger.warning("Rejected data row %d: %s", row_number, reason)

    @staticmethod
    def _source_name(source) -> str:
        if isinstance(source, (str, os.PathLike)):
            return os.path.basename(os.fspath(source))
        return str(getattr(source, "name", "upload"))
