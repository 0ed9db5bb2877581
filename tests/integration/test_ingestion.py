"""Integration tests for catalog and sales ingestion against SQLite."""

import logging
from datetime import date
from io import BytesIO

import pytest
from sqlalchemy import select

from bookrank.core.errors import IngestionError
from bookrank.ingestion import CatalogIngestor, SalesIngestor
from bookrank.models import Book, Sale


def _books(database):
    with database.session() as session:
        return list(session.scalars(select(Book).order_by(Book.isbn13)))


def _sales(database):
    with database.session() as session:
        return list(session.scalars(select(Sale).order_by(Sale.id)))


def test_catalog_ingestion_stores_every_row(database, catalog_csv) -> None:
    path = catalog_csv(
        "9780000000001;Title A;Author X;Pub Y;Fiction",
        "9780000000002;Title B;Author Z;Pub Y;History",
    )

    report = CatalogIngestor(database).ingest(str(path))

    assert (report.inserted, report.rejected) == (2, 0)
    books = _books(database)
    assert [b.isbn13 for b in books] == ["9780000000001", "9780000000002"]
    assert books[0].title == "Title A"
    assert books[0].author == "Author X"
    assert books[0].publisher == "Pub Y"
    assert books[0].featured_subject == "Fiction"


def test_catalog_ingestion_passes_missing_fields_as_empty_strings(database, catalog_csv) -> None:
    path = catalog_csv("9780000000003;Only Title")

    report = CatalogIngestor(database).ingest(str(path))

    assert report.inserted == 1
    book = _books(database)[0]
    assert book.title == "Only Title"
    assert (book.author, book.publisher, book.featured_subject) == ("", "", "")


def test_duplicate_isbn_is_skipped_and_batch_continues(database, catalog_csv) -> None:
    path = catalog_csv(
        "9780000000001;Title A;Author X;Pub Y;Fiction",
        "9780000000001;Title A v2;Author X;Pub Y;Fiction",
        "9780000000002;Title B;Author Z;Pub Y;History",
    )

    report = CatalogIngestor(database, chunk_size=1).ingest(str(path))

    assert (report.inserted, report.rejected) == (2, 1)
    assert report.rejections[0].row_number == 2
    assert [b.title for b in _books(database)] == ["Title A", "Title B"]


def test_upsert_mode_replaces_existing_book(database, catalog_csv) -> None:
    CatalogIngestor(database).ingest(str(catalog_csv("9780000000001;Title A;Author X;Pub Y;Fiction")))

    path = catalog_csv("9780000000001;Title A (2nd ed.);Author X;Pub W;Fiction", name="again.csv")
    report = CatalogIngestor(database, upsert=True).ingest(str(path))

    assert report.inserted == 1
    books = _books(database)
    assert len(books) == 1
    assert (books[0].title, books[0].publisher) == ("Title A (2nd ed.)", "Pub W")


def test_sales_dates_are_normalized(database, sales_csv) -> None:
    path = sales_csv("9780000000001;01-03-2024;5", "9780000000001;15-03-2024;3")

    report = SalesIngestor(database).ingest(str(path))

    assert report.inserted == 2
    sales = _sales(database)
    assert [s.sale_date for s in sales] == [date(2024, 3, 1), date(2024, 3, 15)]
    assert [s.to_dict()["fecha"] for s in sales] == ["2024-03-01", "2024-03-15"]
    assert [s.quantity for s in sales] == [5, 3]


def test_invalid_sales_rows_are_rejected(database, sales_csv) -> None:
    path = sales_csv(
        "9780000000001;31-13-2024;4",
        "9780000000001;2024-03-01;4",
        "9780000000001;02-03-2024;many",
        "9780000000001;02-03-2024;-2",
        "9780000000001;03-03-2024;7",
    )

    report = SalesIngestor(database, chunk_size=2).ingest(str(path))

    assert (report.inserted, report.rejected) == (1, 4)
    assert [r.row_number for r in report.rejections] == [1, 2, 3, 4]
    sales = _sales(database)
    assert len(sales) == 1
    assert (sales[0].sale_date, sales[0].quantity) == (date(2024, 3, 3), 7)


def test_oversized_quantity_is_rejected_and_batch_continues(database, sales_csv) -> None:
    path = sales_csv("9780000000001;01-03-2024;99999999999999999999", "9780000000001;02-03-2024;5")

    report = SalesIngestor(database).ingest(str(path))

    assert (report.inserted, report.rejected) == (1, 1)
    assert report.rejections[0].row_number == 1
    assert "invalid quantity" in report.rejections[0].reason
    sales = _sales(database)
    assert [(s.sale_date, s.quantity) for s in sales] == [(date(2024, 3, 2), 5)]


class _UncheckedSalesIngestor(SalesIngestor):
    def build_record(self, row):
        return Sale(isbn13=row["isbn13"], sale_date=date(2024, 3, 1), quantity=int(row["ventas"]))


def test_value_the_driver_cannot_bind_is_a_row_rejection(database, sales_csv) -> None:
    path = sales_csv("9780000000001;01-03-2024;99999999999999999999", "9780000000001;02-03-2024;5")

    report = _UncheckedSalesIngestor(database).ingest(str(path))

    assert (report.inserted, report.rejected) == (1, 1)
    assert report.rejections[0].row_number == 1
    assert [s.quantity for s in _sales(database)] == [5]


def test_sales_may_reference_unknown_books(database, sales_csv) -> None:
    report = SalesIngestor(database).ingest(str(sales_csv("9789999999999;01-03-2024;2")))

    assert report.inserted == 1
    assert _books(database) == []


def test_lines_with_extra_fields_are_rejected(database, sales_csv) -> None:
    path = sales_csv("9780000000001;02-03-2024;1", "9780000000001;01-03-2024;5;extra")

    report = SalesIngestor(database).ingest(str(path))

    assert (report.inserted, report.rejected) == (1, 1)
    assert report.rejections[0].row_number is None


def test_row_numbers_count_parsed_data_rows(database, sales_csv, caplog) -> None:
    path = sales_csv(
        "9780000000001;01-03-2024;1",
        "9780000000001;01-03-2024;5;extra",
        "9780000000001;31-13-2024;2",
    )

    with caplog.at_level(logging.WARNING, logger="bookrank.ingestion.base"):
        report = SalesIngestor(database).ingest(str(path))

    assert (report.inserted, report.rejected) == (1, 2)
    # The dropped line is unnumbered; the bad date is the second data row
    assert sorted(r.row_number or 0 for r in report.rejections) == [0, 2]
    assert "Rejected data row 2: invalid date" in caplog.text
    assert "Rejected unparsed line" in caplog.text


def test_ingest_accepts_file_objects(database) -> None:
    source = BytesIO("isbn13;fecha;ventas\n9780000000001;01-03-2024;5\n".encode("utf-8"))

    report = SalesIngestor(database).ingest(source)

    assert report.inserted == 1


def test_missing_header_column_aborts_upload(database, write_csv) -> None:
    path = write_csv("bad.csv", "isbn13;ventas", "9780000000001;5")

    with pytest.raises(IngestionError, match="fecha"):
        SalesIngestor(database).ingest(str(path))
    assert _sales(database) == []


def test_empty_file_aborts_upload(database, tmp_path) -> None:
    path = tmp_path / "empty.csv"
    path.write_bytes(b"")

    with pytest.raises(IngestionError):
        CatalogIngestor(database).ingest(str(path))


def test_undecodable_file_aborts_upload(database, tmp_path) -> None:
    path = tmp_path / "latin1.csv"
    path.write_bytes("isbn13;fecha;ventas\n978;01-03-2024;5\n\xff\xfe;x;y\n".encode("latin-1"))

    with pytest.raises(IngestionError):
        SalesIngestor(database).ingest(str(path))
