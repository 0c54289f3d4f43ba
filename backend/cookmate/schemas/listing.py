"""Listing Schemas — service post and requirement creation bodies.

Invariants:
    - ServicePostCreate.title non-empty, price >= 1
    - RequirementCreate.preferred_price >= 0 when present, urgency defaults to MEDIUM
    - Ownership fields (worker_id, owner_id) are NOT accepted from the client
"""

from typing import Any

from pydantic import Field

from cookmate.core.domain_types import Cuisine, NeedType, Urgency
from cookmate.schemas import CamelModel


class ServicePostCreate(CamelModel):
    title: str = Field(min_length=1)
    cuisine: Cuisine | None = None
    price: int = Field(ge=1)
    service_area: str | None = None
    available_timing: str | None = None
    description: str | None = None
    time_slots: Any = None


class RequirementCreate(CamelModel):
    need_type: NeedType
    details: str | None = None
    preferred_timing: str | None = None
    preferred_price: int | None = Field(None, ge=0)
    block: str | None = None
    flat_no: str | None = None
    urgency: Urgency = Urgency.MEDIUM
