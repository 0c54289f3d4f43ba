"""Requirement Routes — public listing, resident posting and owner deletion."""

from uuid import UUID

from fastapi import APIRouter, Depends

from cookmate.api.dependencies import get_delegated_store, get_public_store
from cookmate.infrastructure.store import DelegatedStore, PublicStore
from cookmate.schemas.listing import RequirementCreate
from cookmate.services import listings

router = APIRouter(prefix="/requirements", tags=["requirements"])


@router.get("")
async def list_requirements(store: PublicStore = Depends(get_public_store)):
    """Open requirements, newest first."""
    return await listings.list_open_requirements(store)


@router.post("")
async def create_requirement(
    body: RequirementCreate,
    store: DelegatedStore = Depends(get_delegated_store),
):
    return await listings.create_requirement(store, body)


@router.delete("/{requirement_id}")
async def delete_requirement(
    requirement_id: UUID,
    store: DelegatedStore = Depends(get_delegated_store),
):
    return await listings.delete_requirement(store, requirement_id)
