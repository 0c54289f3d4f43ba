"""Onboarding Workflow — role selection, auth sync, profile and worker-profile upserts.

Invariants:
    - Role selection is the mandatory first step: profile writes need a User with a role
    - Role re-selection overwrites the role, never creates a second User
    - Profile upsert ALWAYS sets verified=True (self-certifying; see enforce_verification)
    - Worker-profile upsert requires role WORKER and has no verification side effect
    - All reads/writes go through the caller's DelegatedStore

Design Decisions:
    - Functions over a class: each endpoint maps to one coroutine, the store is the only state
    - Empty strings from forms are stored as NULL, matching the listing fields
"""

import logging

from cookmate.core.domain_types import Role
from cookmate.core.enforce_roles import (
    check_can_hold_worker_profile,
    check_can_view_worker_profile,
    check_role_selected,
)
from cookmate.core.errors import NotFoundOrNotOwnedError
from cookmate.infrastructure.store import DelegatedStore, row_to_dict
from cookmate.schemas.account import ProfileUpsert, WorkerProfileUpsert

logger = logging.getLogger(__name__)


def _blank_to_none(value):
    return value or None


async def select_role(store: DelegatedStore, role: Role) -> dict:
    """Create the User with this role, or overwrite the existing role."""
    user = await store.current_user()
    if user is None:
        user = await store.create_user(role)
        logger.info(
            f"Created user with role {role.value}",
            extra={"subject_id": str(store.auth_id)},
        )
    else:
        user = await store.set_role(user, role)
        logger.info(
            f"Updated user role to {role.value}",
            extra={"subject_id": str(store.auth_id)},
        )
    return {"success": True, "userId": user.id, "role": role.value}


async def sync_user(store: DelegatedStore) -> dict:
    """Return the caller's enriched view, bootstrapping a RESIDENT User if absent."""
    user = await store.user_view()
    if user is None:
        await store.create_user(Role.RESIDENT)
        logger.info(
            "Auto-created user with default role",
            extra={"subject_id": str(store.auth_id)},
        )
        user = await store.user_view()
    return {"user": user}


async def get_me(store: DelegatedStore) -> dict | None:
    return await store.user_view()


async def upsert_profile(store: DelegatedStore, body: ProfileUpsert) -> dict:
    user = await store.current_user()
    error = check_role_selected(user.role if user else None)
    if error:
        raise error

    # Profile completion self-verifies. /verify-me and /admin/verify-user apply
    # different rules; the inconsistency is kept pending a product decision.
    profile = await store.upsert_profile(user, {
        "name": body.name,
        "phone": body.phone,
        "block": _blank_to_none(body.block),
        "flat_no": _blank_to_none(body.flat_no),
        "age": body.age,
        "verified": True,
    })
    return row_to_dict(profile)


async def upsert_worker_profile(
    store: DelegatedStore, body: WorkerProfileUpsert,
) -> dict:
    user = await store.current_user()
    error = check_can_hold_worker_profile(user.role if user else None)
    if error:
        raise error

    worker_profile = await store.upsert_worker_profile(user, {
        "worker_type": body.worker_type.value,
        "cuisine": body.cuisine.value if body.cuisine else None,
        "experience_yrs": body.experience_yrs,
        "charges": body.charges,
        "long_term_offer": _blank_to_none(body.long_term_offer),
        "time_slots": body.time_slots,
    })
    return row_to_dict(worker_profile)


async def get_worker_profile(store: DelegatedStore) -> dict:
    user = await store.current_user()
    error = check_can_view_worker_profile(user.role if user else None)
    if error:
        raise error
    worker_profile = await store.worker_profile(user)
    if worker_profile is None:
        raise NotFoundOrNotOwnedError("Worker profile not found")
    return row_to_dict(worker_profile)
