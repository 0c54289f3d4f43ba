"""Request Dependencies — identity resolution and capability-scoped store handles.

Invariants:
    - get_identity raises UnauthenticatedError (401) before any handler body runs
    - get_delegated_store is the default handle for every protected endpoint
    - get_elevated_store is only injected by the two verification endpoints
    - Singletons (verifier, language client) are built lazily from settings once

Design Decisions:
    - FastAPI Depends over middleware: public routes simply do not declare get_identity
    - lru_cache factories: tests swap them with app.dependency_overrides
"""

from functools import lru_cache

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from cookmate.config import get_settings
from cookmate.core.domain_types import Identity
from cookmate.core.errors import UnauthenticatedError
from cookmate.infrastructure.anthropic_client import ResilientAnthropicClient
from cookmate.infrastructure.database import get_db
from cookmate.infrastructure.identity import JWTIdentityVerifier
from cookmate.infrastructure.store import DelegatedStore, ElevatedStore, PublicStore
from cookmate.services.translator import Translator

_bearer = HTTPBearer(auto_error=False)


@lru_cache
def get_identity_verifier() -> JWTIdentityVerifier:
    settings = get_settings()
    return JWTIdentityVerifier(
        secret=settings.auth_jwt_secret,
        audience=settings.auth_jwt_audience,
        algorithm=settings.auth_jwt_algorithm,
    )


@lru_cache
def get_translator() -> Translator:
    settings = get_settings()
    client = ResilientAnthropicClient(
        api_key=settings.anthropic_api_key,
        max_retries=settings.anthropic_max_retries,
        base_delay_ms=settings.anthropic_base_delay_ms,
        max_delay_ms=settings.anthropic_max_delay_ms,
        timeout_seconds=settings.anthropic_timeout_seconds,
    )
    return Translator(
        client,
        model=settings.translation_model,
        max_tokens=settings.translation_max_tokens,
    )


async def get_identity(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
    verifier: JWTIdentityVerifier = Depends(get_identity_verifier),
) -> Identity:
    """Resolve the bearer token or abort the request with 401."""
    if credentials is None or not credentials.credentials:
        raise UnauthenticatedError("No token provided")
    return verifier.verify(credentials.credentials)


async def get_public_store(db: AsyncSession = Depends(get_db)) -> PublicStore:
    return PublicStore(db)


async def get_delegated_store(
    identity: Identity = Depends(get_identity),
    db: AsyncSession = Depends(get_db),
) -> DelegatedStore:
    return DelegatedStore(db, identity)


async def get_elevated_store(db: AsyncSession = Depends(get_db)) -> ElevatedStore:
    return ElevatedStore(db)
