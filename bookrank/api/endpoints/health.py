"""
Health check endpoint
"""

import time

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from bookrank import __version__
from bookrank.core.database import Database, get_database

router = APIRouter()


@router.get("/health")
def health_check(database: Database = Depends(get_database)):
    """Health check endpoint for monitoring"""
    connected = database.check_connection()
    body = {
        "status": "healthy" if connected else "unhealthy",
        "database": "connected" if connected else "disconnected",
        "timestamp": time.time(),
        "version": __version__,
    }
    if not connected:
        return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=body)
    return body
