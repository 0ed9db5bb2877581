"""
Main API router that includes all endpoint routers
"""

from fastapi import APIRouter

from bookrank.api.endpoints import books, health, rankings, uploads, windows

# Create main API router
api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(uploads.router, tags=["uploads"])
api_router.include_router(books.router, tags=["books"])
api_router.include_router(rankings.router, tags=["rankings"])
api_router.include_router(windows.router, tags=["windows"])
api_router.include_router(health.router, tags=["health"])
