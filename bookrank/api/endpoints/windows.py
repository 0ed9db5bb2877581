"""
Window discovery endpoints
"""

from typing import List

from fastapi import APIRouter, Depends

from bookrank.core.database import Database, get_database
from bookrank.reporting import WindowCatalog
from bookrank.schemas import MonthEntry, WeekEntry

router = APIRouter()


@router.get("/weeks", response_model=List[WeekEntry])
def list_weeks(database: Database = Depends(get_database)):
    """ISO week keys with at least one sale, oldest first"""
    return [WeekEntry(week=key) for key in WindowCatalog(database).list_available_weeks()]


@router.get("/months", response_model=List[MonthEntry])
def list_months(database: Database = Depends(get_database)):
    """Month keys with at least one sale, oldest first"""
    return [MonthEntry(month=key) for key in WindowCatalog(database).list_available_months()]
