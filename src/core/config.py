"""Gigboard settings, read from the environment by pydantic-settings.

Only DATABASE_URL and SECRET_KEY are required; everything else has a
default suitable for local development.

    from src.core.config import get_settings

    limit = get_settings().default_page_size
"""

from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.enums import Environment


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Environment = Environment.DEVELOPMENT
    debug: bool = False
    log_level: str = Field(default="INFO", description="DEBUG, INFO, WARNING, ...")

    app_name: str = "Gigboard"
    app_version: str = "0.1.0"

    database_url: str = Field(
        description="SQLAlchemy async URL, e.g. postgresql+asyncpg://... or sqlite+aiosqlite:///..."
    )
    db_echo: bool = Field(default=False, description="Echo SQL statements")

    # Tokens are issued elsewhere; this service only verifies them
    secret_key: str = Field(description="HMAC key shared with the token issuer")
    algorithm: str = "HS256"

    api_base_url: str = Field(
        default="http://localhost:8000",
        description="Prefix for problem `type` URIs",
    )
    api_v1_prefix: str = "/api/v1"

    default_page_size: int = Field(
        default=20, description="`limit` used when a listing omits it"
    )
    max_page_size: int = Field(default=100, description="Cap applied to `limit`")

    aggregate_write_retries: int = Field(
        default=5,
        description="Attempts per command when another writer bumps the project version",
    )
    notify_auto_rejected: bool = Field(
        default=True,
        description="Tell applicants when an acceptance or cancellation rejects them",
    )

    @field_validator("api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("default_page_size", "max_page_size", "aggregate_write_retries")
    @classmethod
    def require_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("must be at least 1")
        return v

    @model_validator(mode="after")
    def check_page_sizes(self) -> "Settings":
        if self.default_page_size > self.max_page_size:
            raise ValueError("default_page_size must not exceed max_page_size")
        return self

    @property
    def is_development(self) -> bool:
        return self.environment is Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        return self.environment is Environment.TESTING

    @property
    def is_ci(self) -> bool:
        return self.environment is Environment.CI

    @property
    def is_production(self) -> bool:
        return self.environment is Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """Process-wide settings, loaded once. Tests call `get_settings.cache_clear()`."""
    return Settings()  # type: ignore[call-arg]
