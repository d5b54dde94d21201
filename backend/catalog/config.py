"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - Settings are read once per process; get_settings() is cached (lru_cache)
    - storage_layout selects exactly one persistence layout per deployment

Design Decisions:
    - Defaults provided for all settings: works out-of-the-box with docker-compose
    - environment=development is the only switch that exposes error details to clients
"""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://catalog:catalog@db:5432/catalog"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted Postgres URLs come as postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Storage
    storage_layout: Literal["records", "blob"] = "records"
    seed_dir: str | None = None

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    environment: Literal["development", "production"] = "production"

    # API
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def expose_error_details(self) -> bool:
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    return Settings()
