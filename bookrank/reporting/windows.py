"""
Windows — Week / month keys and the catalog of windows present in the ledger.

Keys:
    week   'YYYY-WW'  ISO year and ISO week number, zero padded
    month  'YYYY-MM'

Every key maps to a half-open date range [start, end) so that rankings
filter the ledger with plain parameterized date comparisons. The same
functions produce the keys listed by WindowCatalog, which keeps every
listed key a valid ranking input.
"""

from __future__ import annotations

import re
from datetime import date, timedelta

from sqlalchemy import select

from bookrank.core.database import Database
from bookrank.models.sale import Sale


DateRange = tuple[date, date]

_KEY_RE = re.compile(r"^(\d{4})-(\d{2})$")


def week_key(day: date) -> str:
    """
    Example:
        week_key(date(2024, 3, 1))   → '2024-09'
        week_key(date(2024, 12, 30)) → '2025-01'
    """
    iso_year, iso_week, _ = day.isocalendar()
    return f"{iso_year:04d}-{iso_week:02d}"


def month_key(day: date) -> str:
    return f"{day.year:04d}-{day.month:02d}"


def _split_key(key: str | None) -> tuple[int, int] | None:
    match = _KEY_RE.match(key or "")
    if not match:
        return None
    return int(match.group(1)), int(match.group(2))


def week_range(key: str | None) -> DateRange | None:
    """Monday of the ISO week through the following Monday; None if *key* is not a week."""
    parts = _split_key(key)
    if parts is None:
        return None
    year, week = parts
    try:
        start = date.fromisocalendar(year, week, 1)
        return start, start + timedelta(days=7)
    except (ValueError, OverflowError):
        return None


def month_range(key: str | None) -> DateRange | None:
    """First day of the month through the first day of the next; None if *key* is not a month."""
    parts = _split_key(key)
    if parts is None:
        return None
    year, month = parts
    try:
        start = date(year, month, 1)
        end = date(year + 1, 1, 1) if month == 12 else date(year, month + 1, 1)
    except ValueError:
        return None
    return start, end


def year_range(year: int) -> DateRange:
    return date(year, 1, 1), date(year + 1, 1, 1)


class WindowCatalog:
    """
    Lists the distinct weeks and months that have at least one sale.

    Usage:
        catalog = WindowCatalog(database)
        catalog.list_available_months()  → ['2024-02', '2024-03']
    """

    def __init__(self, database: Database):
        self.database = database

    def list_available_weeks(self) -> list[str]:
        return sorted({week_key(day) for day in self._sale_dates()})

    def list_available_months(self) -> list[str]:
        return sorted({month_key(day) for day in self._sale_dates()})

    def _sale_dates(self) -> list[date]:
        with self.database.session() as session:
            return list(session.scalars(select(Sale.sale_date).distinct()))
