"""Service test fixtures — async DB, FastAPI test client, token minting, fake language model.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so the readiness probe sees the test engine
    - Tokens are signed with the configured secret, so the real verifier runs
    - The language model is never called: get_translator is overridden with a fake client

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (ON CONFLICT upserts and RETURNING are supported by both dialects)
    - make_token returns headers, not a raw token: every call site needs the header
"""

import time
from types import SimpleNamespace
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest
from jose import jwt
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from cookmate.api.dependencies import get_translator
from cookmate.config import get_settings
from cookmate.db.base import Base
from cookmate.infrastructure.database import get_db, DatabaseSessionManager
import cookmate.infrastructure.database as db_module
from cookmate.main import app
from cookmate.services.translator import Translator
from tests.services.workflow_helpers import text_response


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def fake_llm():
    """Stand-in for ResilientAnthropicClient; configure create_message per test."""
    client = SimpleNamespace()
    client.create_message = AsyncMock(return_value=text_response(""))
    return client


@pytest.fixture
async def client(test_engine, test_session_factory, fake_llm):
    """FastAPI test client with DB and translator dependencies overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_translator] = (
        lambda: Translator(fake_llm, model="test-model")
    )

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def make_token():
    """Mint a bearer header for a (new or given) identity subject."""
    settings = get_settings()

    def _make(subject=None, email="user@example.com", expires_in=3600, **claims):
        payload = {
            "sub": str(subject or uuid4()),
            "aud": settings.auth_jwt_audience,
            "email": email,
            "exp": int(time.time()) + expires_in,
            **claims,
        }
        token = jwt.encode(
            payload, settings.auth_jwt_secret,
            algorithm=settings.auth_jwt_algorithm,
        )
        return {"Authorization": f"Bearer {token}"}

    return _make
