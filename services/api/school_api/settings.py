"""API service configuration.

A single `Settings` object is built once at startup (from the environment and
an optional `.env` file) and handed to `create_app(...)`. Nothing else in the
service reads environment variables directly.
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL

from common.db import build_database_url


class Settings(BaseSettings):
    """Environment-backed service settings."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # Store
    DB_HOST: str = "localhost"
    DB_PORT: Optional[int] = None
    DB_USER: str = "root"
    DB_PASSWORD: str = ""
    DB_NAME: str = "school_management"
    DB_DRIVER: str = "mysql+pymysql"
    DATABASE_URL: Optional[str] = None  # overrides the DB_* pieces when set
    DB_CREATE_TABLES: bool = True

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    @property
    def database_url(self) -> str | URL:
        """Connection URL for the store, preferring `DATABASE_URL` when given."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return build_database_url(
            driver=self.DB_DRIVER,
            host=self.DB_HOST,
            user=self.DB_USER,
            password=self.DB_PASSWORD,
            database=self.DB_NAME,
            port=self.DB_PORT,
        )


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide Settings, built on first use."""
    return Settings()
