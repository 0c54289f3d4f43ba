"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - database_url, auth_jwt_secret, anthropic_api_key and cors_origins are required
    - get_settings() is cached (lru_cache) — single instance per process
    - Missing required settings raise ConfigurationError before any listener binds

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - ConfigurationError instead of exiting the process: startup failure is a
      structured error naming every missing field
"""

import json
from functools import lru_cache
from typing import Annotated

from pydantic import ValidationError, field_validator
from pydantic_settings import (
    BaseSettings, NoDecode, SettingsConfigDict, SettingsError,
)

from cookmate.core.errors import ConfigurationError


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database (store URL)
    database_url: str

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted Postgres provides postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Identity provider — tokens are HS256 JWTs signed with the store's JWT secret
    auth_jwt_secret: str
    auth_jwt_audience: str = "authenticated"
    auth_jwt_algorithm: str = "HS256"

    # Anthropic (translation / language detection)
    anthropic_api_key: str
    anthropic_max_retries: int = 3
    anthropic_timeout_seconds: int = 60
    anthropic_base_delay_ms: int = 1000
    anthropic_max_delay_ms: int = 60_000
    translation_model: str = "claude-3-5-haiku-latest"
    translation_max_tokens: int = 1024

    # API — JSON list or comma-separated origins
    cors_origins: Annotated[list[str], NoDecode]

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_origins(cls, v):
        if not isinstance(v, str):
            return v
        v = v.strip()
        if v.startswith("["):
            return json.loads(v)
        return [origin.strip() for origin in v.split(",") if origin.strip()]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


def load_settings() -> Settings:
    """Build Settings, converting validation and parsing failures into ConfigurationError."""
    try:
        return Settings()
    except ValidationError as e:
        fields = sorted({
            ".".join(str(loc) for loc in err["loc"]) for err in e.errors()
        })
        raise ConfigurationError(fields) from e
    except SettingsError as e:
        raise ConfigurationError([_settings_error_field(e)]) from e


def _settings_error_field(e: SettingsError) -> str:
    """SettingsError only names the offending field inside its message."""
    for name in Settings.model_fields:
        if f'"{name}"' in str(e):
            return name
    return "settings"


@lru_cache
def get_settings() -> Settings:
    return load_settings()
