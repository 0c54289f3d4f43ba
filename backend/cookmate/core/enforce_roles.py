"""Role Gate Enforcement — validates who may perform each onboarding/listing step.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Return the error to raise on violation, None on success
    - A caller without a User row is treated exactly like a caller without a role

Design Decisions:
    - Return errors (not raise): services decide when to raise, tests assert without pytest.raises
    - Role is taken as a plain value (str | None) so checks work on ORM rows and view rows alike
"""

from cookmate.core.domain_types import Role
from cookmate.core.errors import (
    CookmateError,
    NotFoundOrNotOwnedError,
    PreconditionFailedError,
    RoleForbiddenError,
)


def check_role_selected(role: str | None) -> CookmateError | None:
    """Profile creation requires a role chosen via /select-role."""
    if not role:
        return PreconditionFailedError(
            "Please select your role first using /select-role",
        )
    return None


def check_can_hold_worker_profile(role: str | None) -> CookmateError | None:
    """Only workers may create or update a worker profile."""
    if role != Role.WORKER.value:
        return PreconditionFailedError("Only workers can create worker profiles")
    return None


def check_can_post_service(role: str | None) -> CookmateError | None:
    """Only workers may publish service posts."""
    if role != Role.WORKER.value:
        return RoleForbiddenError("Only workers can post services")
    return None


def check_worker_profile_exists(worker_profile_id) -> CookmateError | None:
    """A service post always references an existing worker profile."""
    if worker_profile_id is None:
        return PreconditionFailedError("Please complete your worker profile first")
    return None


def check_can_post_requirement(role: str | None) -> CookmateError | None:
    """Only residents may publish requirements."""
    if role != Role.RESIDENT.value:
        return RoleForbiddenError("Only residents can post requirements")
    return None


def check_can_view_worker_profile(role: str | None) -> CookmateError | None:
    if role != Role.WORKER.value:
        return NotFoundOrNotOwnedError("Worker profile not found")
    return None
