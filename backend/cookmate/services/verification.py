"""Verification Workflow — administrative and self-service profile verification.

Invariants:
    - Admin path: target by user_id or auth_id (one required), sets any verified value,
      no eligibility check
    - Self path: eligibility computed on the caller's users_view row; verified=True
      only when nothing is missing, otherwise 400 listing what is missing
    - Both paths write through the ElevatedStore; nothing else does

Design Decisions:
    - Admin verification only requires an authenticated caller. There is no admin
      role in the data model yet; this endpoint is unguarded and must be gated
      before exposing it outside trusted clients.
"""

import logging

from cookmate.core.enforce_verification import compute_verification_missing
from cookmate.core.errors import (
    NotFoundOrNotOwnedError,
    PreconditionFailedError,
    VerificationIncompleteError,
)
from cookmate.infrastructure.store import DelegatedStore, ElevatedStore, row_to_dict
from cookmate.schemas.verification import AdminVerifyRequest

logger = logging.getLogger(__name__)


async def admin_verify_user(
    elevated: ElevatedStore, body: AdminVerifyRequest, requested_by: str,
) -> dict:
    if body.user_id is None and body.auth_id is None:
        raise PreconditionFailedError("Either userId or authId must be provided")

    target_user_id = body.user_id
    if target_user_id is None:
        target_user_id = await elevated.user_id_for_auth_id(body.auth_id)
        if target_user_id is None:
            raise NotFoundOrNotOwnedError("User not found")

    profile = await elevated.set_profile_verified(target_user_id, body.verified)
    if profile is None:
        raise NotFoundOrNotOwnedError("Profile not found")

    logger.warning(
        f"Admin set verified={body.verified} for user {target_user_id}",
        extra={"subject_id": requested_by},
    )
    state = "verified" if body.verified else "unverified"
    return {
        "success": True,
        "message": f"User {state} successfully",
        "profile": row_to_dict(profile),
    }


async def verify_self(store: DelegatedStore, elevated: ElevatedStore) -> dict:
    user = await store.user_view()
    if user is None:
        raise NotFoundOrNotOwnedError("User not found")

    missing = compute_verification_missing(user)
    if not missing.eligible:
        raise VerificationIncompleteError(
            basic_profile=missing.basic_profile,
            worker_profile=missing.worker_profile,
        )

    profile = await elevated.set_profile_verified(user["id"], True)
    if profile is None:
        raise NotFoundOrNotOwnedError("Profile not found")
    return {
        "success": True,
        "message": "Profile verified successfully!",
        "profile": row_to_dict(profile),
    }
