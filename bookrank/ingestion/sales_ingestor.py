"""
Sales Ingestor — Appends dated sales rows to the ledger.

Expected header:
    isbn13;fecha;ventas

'fecha' must be DD-MM-YYYY and a real calendar day; 'ventas' must be an
integer between 0 and MAX_QUANTITY. Rows failing either check are rejected.
"""

from __future__ import annotations

from bookrank.models.sale import Sale

from .base import DelimitedIngestor, RowRejected
from .cleaning import MAX_QUANTITY, clean_identifier, parse_quantity, parse_sale_date
from .columns import SALES_COLUMNS


class SalesIngestor(DelimitedIngestor):

    REQUIRED_COLUMNS = SALES_COLUMNS
    RECORD_NAME = "sale"

    def build_record(self, row: dict[str, str]) -> Sale:
        sale_date = parse_sale_date(row.get("fecha"))
        if sale_date is None:
            raise RowRejected(f"invalid date {row.get('fecha')!r}, expected DD-MM-YYYY")

        quantity = parse_quantity(row.get("ventas"))
        if quantity is None:
            raise RowRejected(
                f"invalid quantity {row.get('ventas')!r}, "
                f"expected an integer between 0 and {MAX_QUANTITY}"
            )

        return Sale(
            isbn13=clean_identifier(row.get("isbn13")),
            sale_date=sale_date,
            quantity=quantity,
        )

    def describe(self, record: Sale) -> str:
        return f"{record.isbn13} {record.sale_date.isoformat()} x{record.quantity}"
