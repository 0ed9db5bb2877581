"""
Listing — Every catalog book with its all-time units sold.
"""

from __future__ import annotations

from typing import NamedTuple

from sqlalchemy import func, select

from bookrank.core.database import Database
from bookrank.models.book import Book
from bookrank.models.sale import Sale


class BookTotal(NamedTuple):
    book: Book
    total_sales: int


class CatalogListing:

    def __init__(self, database: Database):
        self.database = database

    def list_books_with_totals(self) -> list[BookTotal]:
        """One entry per book; books without sales report 0."""
        totals = (
            select(Sale.isbn13, func.sum(Sale.quantity).label("total"))
            .group_by(Sale.isbn13)
            .subquery()
        )
        stmt = (
            select(Book, func.coalesce(totals.c.total, 0).label("total_sales"))
            .outerjoin(totals, totals.c.isbn13 == Book.isbn13)
            .order_by(Book.isbn13)
        )
        with self.database.session() as session:
            return [BookTotal(book, int(total)) for book, total in session.execute(stmt).all()]
