"""Service Post Routes — public listing and owner-only lifecycle of service posts.

Invariants:
    - GET /services is public and returns active posts only, newest first
    - GET /my-services lists the caller's posts derived from the token, never a query filter
    - PATCH/DELETE return 404 for both unknown and foreign post ids
"""

from uuid import UUID

from fastapi import APIRouter, Depends

from cookmate.api.dependencies import get_delegated_store, get_public_store
from cookmate.infrastructure.store import DelegatedStore, PublicStore
from cookmate.schemas.listing import ServicePostCreate
from cookmate.services import listings

router = APIRouter(tags=["services"])


@router.get("/services")
async def list_services(store: PublicStore = Depends(get_public_store)):
    return await listings.list_active_services(store)


@router.post("/services")
async def create_service(
    body: ServicePostCreate,
    store: DelegatedStore = Depends(get_delegated_store),
):
    """Publish a service post (workers with a worker profile only)."""
    return await listings.create_service_post(store, body)


@router.get("/my-services")
async def list_my_services(store: DelegatedStore = Depends(get_delegated_store)):
    return await listings.list_my_services(store)


@router.patch("/services/{service_id}/toggle")
async def toggle_service(
    service_id: UUID, store: DelegatedStore = Depends(get_delegated_store),
):
    """Flip is_active on one of the caller's posts."""
    return await listings.toggle_service_post(store, service_id)


@router.delete("/services/{service_id}")
async def delete_service(
    service_id: UUID, store: DelegatedStore = Depends(get_delegated_store),
):
    return await listings.delete_service_post(store, service_id)
