"""
Ranking — Top sellers per time window and grouping dimension.

Joins the sales ledger to the catalog, keeps the sales inside the
requested window, sums units per group and returns the best groups.

Periods:
    weekly   window value 'YYYY-WW' (ISO week)
    monthly  window value 'YYYY-MM'
    yearly   always the current calendar year; the window value is ignored

Categories:
    author            books.autor
    editorial         books.editorial
    featured_subject  books.texto_bic_materia_destacada  (alias: materia_destacada)
    book              (books.isbn13, books.titulo)       (fallback)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Callable

from sqlalchemy import func, select

from bookrank.core.database import Database
from bookrank.models.book import Book
from bookrank.models.sale import Sale

from .windows import DateRange, month_range, week_range, year_range

logger = logging.getLogger(__name__)


DEFAULT_LIMIT = 10


class Period(str, Enum):
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


class Category(str, Enum):
    AUTHOR = "author"
    EDITORIAL = "editorial"
    FEATURED_SUBJECT = "featured_subject"
    BOOK = "book"

    @classmethod
    def parse(cls, value: str | Category | None) -> Category:
        """Map request text onto a category by exact match; anything else ranks per book."""
        if isinstance(value, cls):
            return value
        return _CATEGORY_ALIASES.get(value or "", cls.BOOK)


_CATEGORY_ALIASES = {
    "author": Category.AUTHOR,
    "editorial": Category.EDITORIAL,
    "featured_subject": Category.FEATURED_SUBJECT,
    "materia_destacada": Category.FEATURED_SUBJECT,
    "book": Category.BOOK,
}

# Closed set of grouping columns; request text never reaches the SQL
_GROUP_COLUMNS = {
    Category.AUTHOR: (Book.author,),
    Category.EDITORIAL: (Book.publisher,),
    Category.FEATURED_SUBJECT: (Book.featured_subject,),
    Category.BOOK: (Book.isbn13, Book.title),
}


@dataclass(frozen=True)
class RankedGroup:
    """One ranking row. isbn13 is set only for the per-book grouping."""

    category: str | None
    total_sales: int
    isbn13: str | None = None


class RankingEngine:
    """
    Read-only aggregation over the sales ledger.

    Usage:
        engine = RankingEngine(database)
        engine.rank("monthly", "author", "2024-03")
    """

    def __init__(
        self,
        database: Database,
        limit: int = DEFAULT_LIMIT,
        today: Callable[[], date] = date.today,
    ):
        self.database = database
        self.limit = limit
        self._today = today

    def rank(
        self,
        period: str | Period,
        category: str | Category | None,
        window_value: str | None = None,
    ) -> list[RankedGroup]:
        """
        Args:
            period:       weekly, monthly or yearly. Anything else raises ValueError.
            category:     grouping dimension; unknown values rank per book.
            window_value: week or month key; ignored for yearly.

        Returns:
            At most `limit` groups, highest total first. An unparseable
            week or month key gives an empty list.
        """
        period = Period(period)
        category = Category.parse(category)

        window = self.window_for(period, window_value)
        if window is None:
            logger.info("No %s window matches %r", period.value, window_value)
            return []

        columns = _GROUP_COLUMNS[category]
        total = func.sum(Sale.quantity).label("total_sales")
        start, end = window
        stmt = (
            select(*columns, total)
            .select_from(Sale)
            .join(Book, Sale.isbn13 == Book.isbn13)
            .where(Sale.sale_date >= start, Sale.sale_date < end)
            .group_by(*columns)
            .order_by(total.desc(), *columns)
            .limit(self.limit)
        )

        logger.debug("Ranking %s/%s for %s..%s", period.value, category.value, start, end)
        with self.database.session() as session:
            rows = session.execute(stmt).all()

        if category is Category.BOOK:
            return [
                RankedGroup(category=title, total_sales=int(total_sales), isbn13=isbn13)
                for isbn13, title, total_sales in rows
            ]
        return [
            RankedGroup(category=label, total_sales=int(total_sales))
            for label, total_sales in rows
        ]

    def window_for(self, period: Period, window_value: str | None) -> DateRange | None:
        if period is Period.WEEKLY:
            return week_range(window_value)
        if period is Period.MONTHLY:
            return month_range(window_value)
        return year_range(self._today().year)
