"""
Cleaning — Field normalization for uploaded catalog and sales rows.

Sales dates arrive as DD-MM-YYYY and are stored as calendar dates
(YYYY-MM-DD). Quantities must be non-negative integers that fit a
32-bit signed column.
Text fields are passed through untouched.
"""

from __future__ import annotations

import re
from datetime import date, datetime

import pandas as pd


SOURCE_DATE_FORMAT = "%d-%m-%Y"

_SOURCE_DATE_RE = re.compile(r"^\d{2}-\d{2}-\d{4}$")
_QUANTITY_RE = re.compile(r"^\d+$")

MAX_QUANTITY = 2**31 - 1


def clean_text(value: object) -> str:
    """Return *value* as a string, mapping missing cells to ''."""
    if value is None:
        return ""
    if not isinstance(value, str) and pd.isna(value):
        return ""
    return str(value)


def clean_identifier(value: object) -> str:
    """Like clean_text, with surrounding whitespace removed."""
    return clean_text(value).strip()


def parse_sale_date(value: object) -> date | None:
    """
    Parse a DD-MM-YYYY string into a date.

    Returns None unless the value has exactly that shape and names a
    real calendar day.

    Example:
        parse_sale_date('01-03-2024')  → date(2024, 3, 1)
        parse_sale_date('31-13-2024')  → None
        parse_sale_date('1-3-2024')    → None
    """
    text = clean_text(value).strip()
    if not _SOURCE_DATE_RE.match(text):
        return None
    try:
        return datetime.strptime(text, SOURCE_DATE_FORMAT).date()
    except ValueError:
        return None


def parse_quantity(value: object) -> int | None:
    """Parse a units-sold cell; None unless it is an integer in 0..MAX_QUANTITY."""
    text = clean_text(value).strip()
    if not _QUANTITY_RE.match(text):
        return None
    quantity = int(text)
    if quantity > MAX_QUANTITY:
        return None
    return quantity
