"""Account Routes — role selection, auth sync, self view and profile upsert.

Invariants:
    - Every route here requires a bearer token (get_delegated_store -> get_identity)
    - Request bodies validated by Pydantic before the service is called
"""

import logging

from fastapi import APIRouter, Depends

from cookmate.api.dependencies import get_delegated_store
from cookmate.infrastructure.store import DelegatedStore
from cookmate.schemas.account import ProfileUpsert, RoleSelection
from cookmate.services import onboarding

logger = logging.getLogger(__name__)
router = APIRouter(tags=["accounts"])


@router.post("/select-role")
async def select_role(
    body: RoleSelection, store: DelegatedStore = Depends(get_delegated_store),
):
    """Set or overwrite the caller's role (mandatory first step)."""
    return await onboarding.select_role(store, body.role)


@router.post("/auth/sync")
async def sync_auth(store: DelegatedStore = Depends(get_delegated_store)):
    """Fetch the caller's user, creating it as RESIDENT on first contact."""
    return await onboarding.sync_user(store)


@router.get("/me")
async def get_me(store: DelegatedStore = Depends(get_delegated_store)):
    return await onboarding.get_me(store)


@router.post("/profile")
async def upsert_profile(
    body: ProfileUpsert, store: DelegatedStore = Depends(get_delegated_store),
):
    """Create or update the caller's profile (auto-verifies)."""
    return await onboarding.upsert_profile(store, body)
