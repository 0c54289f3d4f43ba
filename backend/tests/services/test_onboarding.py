"""Onboarding — role selection, auth sync, profile and worker-profile upserts.

Invariants:
    - /select-role creates the User on first call and overwrites the role afterwards
    - /auth/sync bootstraps a RESIDENT User when none exists
    - /profile needs a role (400), auto-verifies, and is idempotent per user
    - Phone numbers are globally unique (409 PHONE_IN_USE)
    - /worker-profile is WORKER-only
"""

from sqlalchemy import Text

from cookmate.models import Profile
from tests.services.workflow_helpers import onboard_resident, onboard_worker


# ─── Role selection / sync ───────────────────────────────────────

async def test_select_role_creates_user(client, make_token):
    headers = make_token()
    res = await client.post("/select-role", json={"role": "WORKER"}, headers=headers)
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert body["role"] == "WORKER"
    assert body["userId"]


async def test_select_role_twice_overwrites_role(client, make_token):
    headers = make_token()
    first = await client.post("/select-role", json={"role": "RESIDENT"}, headers=headers)
    second = await client.post("/select-role", json={"role": "WORKER"}, headers=headers)
    assert first.json()["userId"] == second.json()["userId"]

    me = await client.get("/me", headers=headers)
    assert me.json()["role"] == "WORKER"


async def test_select_role_rejects_unknown_role(client, make_token):
    res = await client.post("/select-role", json={"role": "ADMIN"}, headers=make_token())
    assert res.status_code == 422
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_auth_sync_creates_resident(client, make_token):
    headers = make_token()
    res = await client.post("/auth/sync", headers=headers)
    assert res.status_code == 200
    user = res.json()["user"]
    assert user["role"] == "RESIDENT"
    assert user["name"] is None


async def test_auth_sync_keeps_existing_role(client, make_token):
    headers = make_token()
    await client.post("/select-role", json={"role": "WORKER"}, headers=headers)
    res = await client.post("/auth/sync", headers=headers)
    assert res.json()["user"]["role"] == "WORKER"


async def test_me_is_null_before_onboarding(client, make_token):
    res = await client.get("/me", headers=make_token())
    assert res.status_code == 200
    assert res.json() is None


# ─── Profile ─────────────────────────────────────────────────────

async def test_profile_requires_role(client, make_token):
    res = await client.post(
        "/profile", json={"name": "Asha", "phone": "9876543210"},
        headers=make_token(),
    )
    assert res.status_code == 400
    assert res.json()["error"]["message"] == (
        "Please select your role first using /select-role"
    )


async def test_profile_upsert_auto_verifies(client, make_token):
    profile = await onboard_resident(client, make_token())
    assert profile["verified"] is True
    assert profile["flat_no"] == "103"


async def test_profile_upsert_is_idempotent(client, make_token):
    headers = make_token()
    first = await onboard_resident(client, headers)
    res = await client.post(
        "/profile", json={"name": "Asha K", "phone": "9876543210"},
        headers=headers,
    )
    assert res.status_code == 200
    second = res.json()
    assert second["id"] == first["id"]
    assert second["name"] == "Asha K"

    me = await client.get("/me", headers=headers)
    assert me.json()["name"] == "Asha K"


async def test_profile_phone_conflict_returns_409(client, make_token):
    await onboard_resident(client, make_token(), phone="9000000001")

    other = make_token()
    await client.post("/select-role", json={"role": "RESIDENT"}, headers=other)
    res = await client.post(
        "/profile", json={"name": "Meera", "phone": "9000000001"},
        headers=other,
    )
    assert res.status_code == 409
    assert res.json()["error"]["code"] == "PHONE_IN_USE"


async def test_profile_rejects_short_phone(client, make_token):
    headers = make_token()
    await client.post("/select-role", json={"role": "RESIDENT"}, headers=headers)
    res = await client.post(
        "/profile", json={"name": "Asha", "phone": "12345"}, headers=headers,
    )
    assert res.status_code == 422


# ─── Worker profile ──────────────────────────────────────────────

async def test_worker_profile_rejected_for_resident(client, make_token):
    headers = make_token()
    await onboard_resident(client, headers)
    res = await client.post(
        "/worker-profile", json={"workerType": "COOK", "charges": 5000},
        headers=headers,
    )
    assert res.status_code == 400
    assert res.json()["error"]["message"] == "Only workers can create worker profiles"


async def test_worker_profile_upsert_and_fetch(client, make_token):
    headers = make_token()
    created = await onboard_worker(client, headers)
    assert created["worker_type"] == "COOK"
    assert created["experience_yrs"] == 4

    res = await client.post(
        "/worker-profile", json={"workerType": "BOTH", "charges": 7000},
        headers=headers,
    )
    assert res.json()["id"] == created["id"]
    assert res.json()["experience_yrs"] == 0

    fetched = await client.get("/worker-profile", headers=headers)
    assert fetched.status_code == 200
    assert fetched.json()["worker_type"] == "BOTH"


async def test_get_worker_profile_not_found_for_resident(client, make_token):
    headers = make_token()
    await onboard_resident(client, headers)
    res = await client.get("/worker-profile", headers=headers)
    assert res.status_code == 404


async def test_get_worker_profile_not_found_before_upsert(client, make_token):
    headers = make_token()
    await client.post("/select-role", json={"role": "WORKER"}, headers=headers)
    res = await client.get("/worker-profile", headers=headers)
    assert res.status_code == 404
    assert res.json()["error"]["message"] == "Worker profile not found"


async def test_profile_accepts_long_phone(client, make_token):
    headers = make_token()
    await client.post("/select-role", json={"role": "RESIDENT"}, headers=headers)
    phone = "+91 98765 43210 ext. 1234567890123456"
    res = await client.post(
        "/profile", json={"name": "Asha", "phone": phone}, headers=headers,
    )
    assert res.status_code == 200
    assert res.json()["phone"] == phone


def test_phone_column_is_unbounded_text():
    phone_type = Profile.__table__.c.phone.type
    assert isinstance(phone_type, Text)
    assert phone_type.length is None
