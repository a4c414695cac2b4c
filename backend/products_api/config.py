"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Connection strings and the allowed frontend origin come from the environment
    - get_settings() is cached (lru_cache): one Settings instance per process

Design Decisions:
    - .env file supported for local runs; every setting has a docker-compose friendly default
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://products:products@db:5432/products"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted Postgres hands out postgresql:// or postgres://; asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str):
            for scheme in ("postgresql://", "postgres://"):
                if v.startswith(scheme):
                    return v.replace(scheme, "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10
    # Create missing tables on startup (managed deployments use alembic instead)
    database_auto_create: bool = True

    # API
    frontend_url: str = "http://localhost:5173"

    @field_validator("frontend_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Browsers send Origin without a trailing slash."""
        return v.rstrip("/")

    api_title: str = "Products REST API"
    api_version: str = "1.0.0"

    # Server
    host: str = "0.0.0.0"
    port: int = 4000

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
