"""Worker Profile Routes — upsert and fetch the caller's worker profile."""

from fastapi import APIRouter, Depends

from cookmate.api.dependencies import get_delegated_store
from cookmate.infrastructure.store import DelegatedStore
from cookmate.schemas.account import WorkerProfileUpsert
from cookmate.services import onboarding

router = APIRouter(prefix="/worker-profile", tags=["worker-profile"])


@router.post("")
async def upsert_worker_profile(
    body: WorkerProfileUpsert,
    store: DelegatedStore = Depends(get_delegated_store),
):
    return await onboarding.upsert_worker_profile(store, body)


@router.get("")
async def get_worker_profile(
    store: DelegatedStore = Depends(get_delegated_store),
):
    return await onboarding.get_worker_profile(store)
