"""Verification Eligibility — decides whether a user may self-verify.

Invariants:
    - PURE: operates on a users_view row (dict), no IO
    - Basic profile complete iff name AND phone are present
    - Worker profile only required when role == WORKER: worker_type, charges
      present and experience_yrs not None (0 years is complete)

Design Decisions:
    - Returns the "missing" report rather than a bool: the 400 response tells the
      client exactly which step is outstanding
    - Profile upsert auto-verifies independently of this rule, and admin verification
      skips it entirely. The three paths disagree; kept as-is pending a product decision.
"""

from dataclasses import dataclass

from cookmate.core.domain_types import Role


@dataclass(frozen=True)
class VerificationMissing:
    """Which prerequisites are outstanding for self-verification."""
    basic_profile: bool
    worker_profile: bool

    @property
    def eligible(self) -> bool:
        return not (self.basic_profile or self.worker_profile)


def has_basic_profile(user_view: dict) -> bool:
    return bool(user_view.get("name") and user_view.get("phone"))


def has_worker_profile(user_view: dict) -> bool:
    """Non-workers trivially satisfy the worker-profile prerequisite."""
    if user_view.get("role") != Role.WORKER.value:
        return True
    return bool(
        user_view.get("worker_type")
        and user_view.get("charges")
        and user_view.get("experience_yrs") is not None
    )


def compute_verification_missing(user_view: dict) -> VerificationMissing:
    """Build the missing-prerequisites report for a users_view row."""
    is_worker = user_view.get("role") == Role.WORKER.value
    return VerificationMissing(
        basic_profile=not has_basic_profile(user_view),
        worker_profile=is_worker and not has_worker_profile(user_view),
    )
