"""
Columns — Expected headers of the catalog and sales files.
"""

from __future__ import annotations

from typing import Iterable


CATALOG_COLUMNS = (
    "isbn13", "titulo", "autor", "editorial", "texto_bic_materia_destacada",
)

SALES_COLUMNS = ("isbn13", "fecha", "ventas")


def normalize_header(name: object) -> str:
    """Strip whitespace and a stray byte-order mark from a header cell."""
    return str(name).replace("\ufeff", "").strip()


def missing_columns(columns: Iterable[str], required: Iterable[str]) -> list[str]:
    """Return the required names absent from *columns*, in required order."""
    present = set(columns)
    return [name for name in required if name not in present]
