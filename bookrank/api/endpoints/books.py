"""
Catalog listing endpoint
"""

from typing import List

from fastapi import APIRouter, Depends

from bookrank.core.database import Database, get_database
from bookrank.reporting import CatalogListing
from bookrank.schemas import BookWithSales

router = APIRouter()


@router.get("/books", response_model=List[BookWithSales])
def list_books(database: Database = Depends(get_database)):
    """
    All books with their all-time sales totals
    """
    listing = CatalogListing(database)
    return [
        BookWithSales(**entry.book.to_dict(), total_sales=entry.total_sales)
        for entry in listing.list_books_with_totals()
    ]
