"""
Pydantic schemas for rankings and window discovery
"""

from pydantic import BaseModel, Field
from typing import Optional


class CategoryRankingEntry(BaseModel):
    """Ranking row for author / editorial / featured subject groupings"""

    category: Optional[str] = Field(None, description="Group label")
    total_sales: int = Field(..., description="Units sold in the window")


class BookRankingEntry(BaseModel):
    """Ranking row for the per-title grouping"""

    isbn13: str
    titulo: Optional[str] = None
    total_sales: int = Field(..., description="Units sold in the window")


class WeekEntry(BaseModel):
    week: str = Field(..., examples=["2024-09"])


class MonthEntry(BaseModel):
    month: str = Field(..., examples=["2024-03"])
