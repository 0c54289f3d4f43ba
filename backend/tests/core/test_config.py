"""Settings — required fields and URL normalization."""

import pytest

from cookmate.config import load_settings
from cookmate.core.errors import ConfigurationError


def test_missing_required_settings_raise_configuration_error(monkeypatch):
    monkeypatch.delenv("AUTH_JWT_SECRET", raising=False)
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    with pytest.raises(ConfigurationError) as exc:
        load_settings()
    assert "auth_jwt_secret" in exc.value.fields
    assert "anthropic_api_key" in exc.value.fields


def test_postgres_url_gets_async_driver(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db:5432/cookmate")
    settings = load_settings()
    assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/cookmate"


def test_defaults(monkeypatch):
    monkeypatch.delenv("AUTH_JWT_AUDIENCE", raising=False)
    settings = load_settings()
    assert settings.auth_jwt_audience == "authenticated"
    assert settings.cors_origins == ["http://localhost:3000"]


def test_single_bare_origin_is_accepted(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "https://cookmate.example")
    assert load_settings().cors_origins == ["https://cookmate.example"]


def test_comma_separated_origins_are_split(monkeypatch):
    monkeypatch.setenv(
        "CORS_ORIGINS", "https://cookmate.example, http://localhost:5173",
    )
    assert load_settings().cors_origins == [
        "https://cookmate.example", "http://localhost:5173",
    ]


def test_malformed_origin_list_raises_configuration_error(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", '["https://cookmate.example"')
    with pytest.raises(ConfigurationError) as exc:
        load_settings()
    assert "cors_origins" in exc.value.fields
