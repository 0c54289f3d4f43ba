"""Listings Workflow — service post and requirement lifecycles.

Invariants:
    - Service posts: role WORKER (else 403) and an existing WorkerProfile (else 400)
    - Requirements: role RESIDENT (else 403)
    - Toggle/delete match the row by id AND derived ownership; absent and
      not-owned are the same 404 so ids cannot be probed
    - Requirement deletion resolves the caller's User first, then matches
      ownership by that id: both lookups must succeed
    - Public listings only ever contain active posts / open requirements
"""

import logging
from uuid import UUID

from cookmate.core.enforce_roles import (
    check_can_post_requirement,
    check_can_post_service,
    check_worker_profile_exists,
)
from cookmate.core.errors import NotFoundOrNotOwnedError
from cookmate.infrastructure.store import DelegatedStore, PublicStore, row_to_dict
from cookmate.schemas.listing import RequirementCreate, ServicePostCreate

logger = logging.getLogger(__name__)

_SERVICE_NOT_FOUND = "Service not found or not owned by you"
_REQUIREMENT_NOT_FOUND = "Requirement not found or not owned by you"


# ─── Service posts ───────────────────────────────────────────────

async def list_active_services(store: PublicStore) -> dict:
    return {"services": await store.active_service_posts()}


async def list_my_services(store: DelegatedStore) -> dict:
    return {"services": await store.my_service_posts()}


async def create_service_post(
    store: DelegatedStore, body: ServicePostCreate,
) -> dict:
    user = await store.current_user()
    error = check_can_post_service(user.role if user else None)
    if error:
        raise error

    worker_profile = await store.worker_profile(user)
    error = check_worker_profile_exists(
        worker_profile.id if worker_profile else None,
    )
    if error:
        raise error

    post = await store.insert_service_post(worker_profile.id, {
        "title": body.title,
        "cuisine": body.cuisine.value if body.cuisine else None,
        "price": body.price,
        "service_area": body.service_area or None,
        "available_timing": body.available_timing or None,
        "description": body.description or None,
        "time_slots": body.time_slots or None,
    })
    logger.info(
        f"Service post {post.id} created",
        extra={"subject_id": str(store.auth_id)},
    )
    return row_to_dict(post)


async def toggle_service_post(store: DelegatedStore, post_id: UUID) -> dict:
    post = await store.owned_service_post(post_id)
    if post is None:
        raise NotFoundOrNotOwnedError(_SERVICE_NOT_FOUND)
    post = await store.toggle_service_post(post)
    return row_to_dict(post)


async def delete_service_post(store: DelegatedStore, post_id: UUID) -> dict:
    post = await store.owned_service_post(post_id)
    if post is None or not await store.delete_service_post(post.id):
        raise NotFoundOrNotOwnedError(_SERVICE_NOT_FOUND)
    return {"success": True, "message": "Service deleted successfully"}


# ─── Requirements ────────────────────────────────────────────────

async def list_open_requirements(store: PublicStore) -> dict:
    return {"requirements": await store.open_requirements()}


async def create_requirement(
    store: DelegatedStore, body: RequirementCreate,
) -> dict:
    user = await store.current_user()
    error = check_can_post_requirement(user.role if user else None)
    if error:
        raise error

    requirement = await store.insert_requirement(user, {
        "need_type": body.need_type.value,
        "details": body.details or None,
        "preferred_timing": body.preferred_timing or None,
        "preferred_price": body.preferred_price or None,
        "block": body.block or None,
        "flat_no": body.flat_no or None,
        "urgency": body.urgency.value,
    })
    logger.info(
        f"Requirement {requirement.id} created",
        extra={"subject_id": str(store.auth_id)},
    )
    return row_to_dict(requirement)


async def delete_requirement(
    store: DelegatedStore, requirement_id: UUID,
) -> dict:
    user = await store.current_user()
    if user is None:
        raise NotFoundOrNotOwnedError("User not found")

    requirement = await store.owned_requirement(requirement_id, user.id)
    if requirement is None or not await store.delete_requirement(requirement.id):
        raise NotFoundOrNotOwnedError(_REQUIREMENT_NOT_FOUND)
    return {"success": True, "message": "Requirement deleted successfully"}
