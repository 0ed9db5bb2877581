"""
Pydantic schemas for API responses
"""

from .book import BookBase, BookWithSales
from .ranking import BookRankingEntry, CategoryRankingEntry, MonthEntry, WeekEntry

__all__ = [
    "BookBase", "BookWithSales",
    "BookRankingEntry", "CategoryRankingEntry", "MonthEntry", "WeekEntry",
]
