"""
Read models over the catalog and the sales ledger.

Modules:
    windows  — week / month keys, date ranges and WindowCatalog
    ranking  — RankingEngine (top sellers per window and grouping)
    listing  — CatalogListing (books with all-time totals)
"""

from .listing import BookTotal, CatalogListing
from .ranking import Category, Period, RankedGroup, RankingEngine
from .windows import WindowCatalog, month_key, week_key

__all__ = [
    "BookTotal", "CatalogListing",
    "Category", "Period", "RankedGroup", "RankingEngine",
    "WindowCatalog", "month_key", "week_key",
]
