"""
Database handle and session management

A single Database object is built at startup and shared by every
component through the application state.
"""

from contextlib import contextmanager
from typing import Generator
import logging

from fastapi import Request
from sqlalchemy import create_engine, event, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from bookrank.core.config import Settings
from bookrank.models.base import Base

logger = logging.getLogger(__name__)


def _is_memory_sqlite(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in url


class Database:
    """
    Owns the SQLAlchemy engine and session factory for one store
    """

    def __init__(self, url: str, echo: bool = False, timeout: float = 30.0):
        self.url = url

        engine_options = {"echo": echo}
        if url.startswith("sqlite"):
            engine_options["connect_args"] = {
                "check_same_thread": False,
                "timeout": timeout,
            }
            if _is_memory_sqlite(url):
                # One shared connection, otherwise every checkout sees an empty database
                engine_options["poolclass"] = StaticPool
        else:
            engine_options.update(pool_pre_ping=True, pool_recycle=300)

        self.engine = create_engine(url, **engine_options)
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine,
            expire_on_commit=False,
        )

        if echo:
            @event.listens_for(self.engine, "connect")
            def receive_connect(dbapi_connection, connection_record):
                logger.debug("Database connection established")

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(
            settings.database_url,
            echo=settings.DEBUG,
            timeout=settings.DATABASE_TIMEOUT,
        )

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """
        Context manager for a session that commits on success
        and rolls back on any error
        """
        db = self.SessionLocal()
        try:
            yield db
            db.commit()
        except SQLAlchemyError as e:
            logger.error(f"Database error: {e}")
            db.rollback()
            raise
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def create_tables(self) -> None:
        """
        Create all database tables
        Note: there is no migration tooling; existing tables are left as they are
        """
        try:
            Base.metadata.create_all(bind=self.engine)
            logger.info("Database tables created/verified successfully")
        except SQLAlchemyError as e:
            logger.error(f"Error creating database tables: {e}")
            raise

    def drop_tables(self) -> None:
        """
        Drop all database tables
        WARNING: This will delete all data!
        """
        Base.metadata.drop_all(bind=self.engine)
        logger.info("All database tables dropped")

    def check_connection(self) -> bool:
        """
        Check if the database answers a trivial query
        """
        try:
            with self.session() as db:
                db.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.error(f"Database connection failed: {e}")
            return False

    def dispose(self) -> None:
        self.engine.dispose()


def get_database(request: Request) -> Database:
    """
    Dependency returning the application's Database handle
    """
    return request.app.state.database


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
