"""
Pytest fixtures shared by unit and integration tests.
"""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from bookrank.core.config import Settings
from bookrank.core.database import Database
from bookrank.main import create_app

CATALOG_HEADER = "isbn13;titulo;autor;editorial;texto_bic_materia_destacada"
SALES_HEADER = "isbn13;fecha;ventas"


@pytest.fixture
def database():
    """Fresh in-memory database with the schema created."""
    db = Database("sqlite://")
    db.create_tables()
    yield db
    db.dispose()


@pytest.fixture
def upload_dir(tmp_path):
    path = tmp_path / "uploads"
    path.mkdir()
    return path


@pytest.fixture
def settings(upload_dir):
    return Settings(
        DATABASE_URL="sqlite://",
        UPLOAD_DIR=str(upload_dir),
        CSV_CHUNK_SIZE=2,
    )


@pytest.fixture
def client(settings, database):
    app = create_app(settings=settings, database=database)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def write_csv(tmp_path):
    """Write lines to a CSV file under tmp_path and return its path."""
    def _write(name: str, header: str, *rows: str) -> Path:
        path = tmp_path / name
        path.write_text("\n".join((header,) + rows) + "\n", encoding="utf-8")
        return path
    return _write


@pytest.fixture
def catalog_csv(write_csv):
    def _catalog(*rows: str, name: str = "catalog.csv") -> Path:
        return write_csv(name, CATALOG_HEADER, *rows)
    return _catalog


@pytest.fixture
def sales_csv(write_csv):
    def _sales(*rows: str, name: str = "sales.csv") -> Path:
        return write_csv(name, SALES_HEADER, *rows)
    return _sales
