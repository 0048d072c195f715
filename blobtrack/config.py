"""Configuration management for the blob ingestion service."""

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL, make_url

DEFAULT_API_URL = "https://api-mocha.celenium.io/v1/rollup/10/blobs"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    db_host: str = "localhost"
    db_port: int = 5432
    db_user: str = "postgres"
    db_password: str = ""
    db_name: str = "blobs"
    database_url: Optional[str] = None

    api_url: str = DEFAULT_API_URL
    api_key: str
    poll_interval: float = Field(default=12.0, gt=0)
    request_timeout: float = Field(default=30.0, gt=0)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    model_config = SettingsConfigDict(
        env_file=Path(__file__).resolve().parent.parent / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value

    @property
    def sqlalchemy_url(self) -> URL:
        """Database URL, either DATABASE_URL as given or built from the DB_* parts."""

        if self.database_url:
            return make_url(self.database_url)
        return URL.create(
            "postgresql+psycopg2",
            username=self.db_user,
            password=self.db_password or None,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings()
