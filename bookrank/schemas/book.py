"""
Pydantic schemas for catalog listings
"""

from pydantic import BaseModel, Field
from typing import Optional


class BookBase(BaseModel):
    """Book fields as they appear in the catalog file"""

    isbn13: str = Field(..., description="ISBN-13 identifier", examples=["9780000000001"])
    titulo: Optional[str] = Field(None, description="Title")
    autor: Optional[str] = Field(None, description="Author")
    editorial: Optional[str] = Field(None, description="Publisher")
    texto_bic_materia_destacada: Optional[str] = Field(
        None, description="Featured subject label"
    )


class BookWithSales(BookBase):
    """Book with its all-time sales total"""

    total_sales: int = Field(0, ge=0, description="Units sold across the whole ledger")
