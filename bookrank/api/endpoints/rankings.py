"""
Sales ranking endpoints
"""

from typing import List

from fastapi import APIRouter, Depends
import logging

from bookrank.core.config import Settings
from bookrank.core.database import Database, get_database, get_settings
from bookrank.reporting import Period, RankedGroup, RankingEngine
from bookrank.schemas import BookRankingEntry, CategoryRankingEntry

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sales-ranking")


def get_ranking_engine(
    database: Database = Depends(get_database),
    settings: Settings = Depends(get_settings),
) -> RankingEngine:
    return RankingEngine(database, limit=settings.RANKING_LIMIT)


def _serialize(groups: List[RankedGroup]) -> List[dict]:
    entries = []
    for group in groups:
        if group.isbn13 is not None:
            entries.append(BookRankingEntry(
                isbn13=group.isbn13, titulo=group.category, total_sales=group.total_sales
            ))
        else:
            entries.append(CategoryRankingEntry(
                category=group.category, total_sales=group.total_sales
            ))
    return [entry.model_dump() for entry in entries]


@router.get("/weekly/{week}/{category}")
def weekly_ranking(week: str, category: str, engine: RankingEngine = Depends(get_ranking_engine)):
    """Top sellers for an ISO week key such as 2024-09"""
    return _serialize(engine.rank(Period.WEEKLY, category, week))


@router.get("/monthly/{month}/{category}")
def monthly_ranking(month: str, category: str, engine: RankingEngine = Depends(get_ranking_engine)):
    """Top sellers for a month key such as 2024-03"""
    return _serialize(engine.rank(Period.MONTHLY, category, month))


@router.get("/yearly/{category}")
def yearly_ranking(category: str, engine: RankingEngine = Depends(get_ranking_engine)):
    """Top sellers for the current calendar year"""
    return _serialize(engine.rank(Period.YEARLY, category))
