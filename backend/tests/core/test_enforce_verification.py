"""Verification Eligibility — tests for compute_verification_missing on users_view rows.

Tests cover:
    - Basic profile needs both name and phone
    - Residents never need a worker profile
    - Workers need worker_type, charges and a non-null experience_yrs
    - 0 years of experience counts as complete
"""

from cookmate.core.enforce_verification import (
    compute_verification_missing,
    has_basic_profile,
    has_worker_profile,
)


def _resident(**overrides) -> dict:
    row = {"role": "RESIDENT", "name": "Asha", "phone": "9876543210"}
    row.update(overrides)
    return row


def _worker(**overrides) -> dict:
    row = {
        "role": "WORKER", "name": "Ravi", "phone": "9123456780",
        "worker_type": "COOK", "charges": 6000, "experience_yrs": 3,
    }
    row.update(overrides)
    return row


def test_complete_resident_is_eligible():
    missing = compute_verification_missing(_resident())
    assert missing.eligible
    assert not missing.basic_profile
    assert not missing.worker_profile


def test_resident_without_phone_misses_basic_profile():
    missing = compute_verification_missing(_resident(phone=None))
    assert missing.basic_profile
    assert not missing.worker_profile
    assert not missing.eligible


def test_resident_without_any_profile():
    missing = compute_verification_missing({"role": "RESIDENT"})
    assert missing.basic_profile
    assert not missing.worker_profile


def test_complete_worker_is_eligible():
    assert compute_verification_missing(_worker()).eligible


def test_worker_with_zero_experience_is_complete():
    assert has_worker_profile(_worker(experience_yrs=0))


def test_worker_with_null_experience_is_incomplete():
    missing = compute_verification_missing(_worker(experience_yrs=None))
    assert missing.worker_profile
    assert not missing.basic_profile


def test_worker_without_worker_profile_misses_both_when_no_profile():
    missing = compute_verification_missing({"role": "WORKER"})
    assert missing.basic_profile
    assert missing.worker_profile


def test_has_basic_profile_requires_name():
    assert not has_basic_profile(_resident(name=""))


def test_non_worker_trivially_has_worker_profile():
    assert has_worker_profile({"role": "RESIDENT"})
