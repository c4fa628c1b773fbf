"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - Connection string and port come from the environment (or .env)
    - get_settings() is cached (lru_cache), a single instance per process

Design Decisions:
    - DB_URL accepted as an alias of DATABASE_URL for older deployments
    - Defaults provided for all non-secret settings
"""

from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_INDEX_PAGE = Path(__file__).parent / "static" / "index.html"


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = Field(
        "postgresql+asyncpg://tracker:tracker@db:5432/tracker",
        validation_alias=AliasChoices("database_url", "db_url"),
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted Postgres hands out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # API
    cors_origins: list[str] = ["*"]
    cors_methods: list[str] = ["GET", "POST"]
    index_page: Path = DEFAULT_INDEX_PAGE

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
