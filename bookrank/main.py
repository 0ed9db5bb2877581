"""
FastAPI main application module for the book sales ranking service
"""

from typing import Optional
import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError

from bookrank import __version__
from bookrank.api.api import api_router
from bookrank.core.config import Settings, settings as default_settings
from bookrank.core.database import Database
from bookrank.core.errors import IngestionError

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    database: Optional[Database] = None,
) -> FastAPI:
    """
    Build the application around one Database handle.

    Tests pass their own settings and database; the module-level app
    uses the environment settings.
    """
    settings = settings or default_settings

    # Configure logging
    logging.basicConfig(level=settings.LOG_LEVEL)

    app = FastAPI(
        title="Book Sales Ranking API",
        description="Catalog and sales ingestion with weekly, monthly and yearly sales rankings",
        version=__version__,
    )
    app.state.settings = settings
    app.state.database = database or Database.from_settings(settings)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_HOSTS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Request timing middleware
    @app.middleware("http")
    async def add_process_time_header(request: Request, call_next):
        start_time = time.time()
        response = await call_next(request)
        response.headers["X-Process-Time"] = str(time.time() - start_time)
        return response

    app.include_router(api_router)

    # Storage failures reach the caller verbatim
    @app.exception_handler(SQLAlchemyError)
    async def storage_exception_handler(request: Request, exc: SQLAlchemyError):
        logger.error(f"Storage error on {request.url.path}: {exc}")
        return PlainTextResponse(str(exc), status_code=500)

    @app.exception_handler(IngestionError)
    async def ingestion_exception_handler(request: Request, exc: IngestionError):
        logger.warning(f"Upload rejected on {request.url.path}: {exc}")
        return PlainTextResponse(str(exc), status_code=400)

    @app.on_event("startup")
    async def startup_event():
        """Create tables on startup"""
        logger.info("Starting Book Sales Ranking API...")
        app.state.database.create_tables()
        logger.info("Application startup complete")

    @app.on_event("shutdown")
    async def shutdown_event():
        logger.info("Shutting down Book Sales Ranking API...")
        app.state.database.dispose()

    return app


app = create_app()
