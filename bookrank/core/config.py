"""
Application configuration settings
"""

from pydantic_settings import BaseSettings
from typing import List, Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Application Settings
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    ALLOWED_HOSTS: List[str] = ["*"]

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3001

    # Database Configuration
    DATABASE_URL: str = "sqlite:///./database.db"
    DATABASE_TIMEOUT: float = 30.0  # seconds a SQLite writer waits on a lock

    # Ingestion
    UPLOAD_DIR: Optional[str] = None  # None -> system temp directory
    CSV_CHUNK_SIZE: int = 500
    CATALOG_UPSERT: bool = False

    # Rankings
    RANKING_LIMIT: int = 10

    # Logging
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = True

    @property
    def database_url(self) -> str:
        """DATABASE_URL normalized for SQLAlchemy"""
        if self.DATABASE_URL.startswith("postgres://"):
            return self.DATABASE_URL.replace("postgres://", "postgresql://", 1)
        return self.DATABASE_URL


# Create settings instance
settings = Settings()
