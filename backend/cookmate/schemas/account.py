"""Account Schemas — role selection, profile and worker-profile bodies.

Invariants:
    - ProfileUpsert.name non-empty, phone >= 10 chars (then stripped), age >= 1
    - WorkerProfileUpsert.experience_yrs >= 0 (default 0), charges >= 1
    - time_slots accepts any JSON value; its structure is owned by the client
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from cookmate.core.domain_types import Cuisine, Role, WorkerType
from cookmate.schemas import CamelModel


class RoleSelection(BaseModel):
    role: Role


class ProfileUpsert(CamelModel):
    """Profile body — validated before the role precondition is checked."""
    name: str = Field(min_length=1)
    phone: str = Field(min_length=10)
    block: str | None = None
    flat_no: str | None = None
    age: int | None = Field(None, ge=1)

    @field_validator("phone")
    @classmethod
    def strip_phone(cls, v: str) -> str:
        return v.strip()


class WorkerProfileUpsert(CamelModel):
    worker_type: WorkerType
    cuisine: Cuisine | None = None
    experience_yrs: int = Field(0, ge=0)
    charges: int = Field(ge=1)
    long_term_offer: str | None = None
    time_slots: Any = None
