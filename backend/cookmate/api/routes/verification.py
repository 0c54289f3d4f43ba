"""Verification Routes — admin force-verify and eligibility-gated self-verify.

Invariants:
    - Both routes require a bearer token
    - These are the only routes that receive an ElevatedStore
"""

from fastapi import APIRouter, Depends

from cookmate.api.dependencies import (
    get_delegated_store,
    get_elevated_store,
    get_identity,
)
from cookmate.core.domain_types import Identity
from cookmate.infrastructure.store import DelegatedStore, ElevatedStore
from cookmate.schemas.verification import AdminVerifyRequest
from cookmate.services import verification

router = APIRouter(tags=["verification"])


@router.post("/admin/verify-user")
async def admin_verify_user(
    body: AdminVerifyRequest,
    identity: Identity = Depends(get_identity),
    elevated: ElevatedStore = Depends(get_elevated_store),
):
    return await verification.admin_verify_user(
        elevated, body, requested_by=str(identity.subject_id),
    )


@router.post("/verify-me")
async def verify_me(
    store: DelegatedStore = Depends(get_delegated_store),
    elevated: ElevatedStore = Depends(get_elevated_store),
):
    return await verification.verify_self(store, elevated)
