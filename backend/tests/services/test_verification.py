"""Verification — self-verification eligibility and admin force-verify.

Invariants:
    - /verify-me reports exactly which prerequisite is missing (400)
    - /verify-me sets verified=True once eligible
    - /admin/verify-user targets by userId or authId and skips eligibility
"""

from uuid import uuid4

from tests.services.workflow_helpers import onboard_resident


async def _me(client, headers):
    return (await client.get("/me", headers=headers)).json()


async def test_verify_me_without_user_is_not_found(client, make_token):
    res = await client.post("/verify-me", headers=make_token())
    assert res.status_code == 404


async def test_verify_me_reports_missing_basic_profile(client, make_token):
    headers = make_token()
    await client.post("/select-role", json={"role": "RESIDENT"}, headers=headers)
    res = await client.post("/verify-me", headers=headers)
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VERIFICATION_INCOMPLETE"
    assert error["missing"] == {"basicProfile": True, "workerProfile": False}


async def test_verify_me_reports_missing_worker_profile(client, make_token):
    headers = make_token()
    await client.post("/select-role", json={"role": "WORKER"}, headers=headers)
    await client.post(
        "/profile", json={"name": "Ravi", "phone": "9123456780"}, headers=headers,
    )
    res = await client.post("/verify-me", headers=headers)
    assert res.status_code == 400
    assert res.json()["error"]["missing"] == {
        "basicProfile": False, "workerProfile": True,
    }


async def test_verify_me_succeeds_when_eligible(client, make_token):
    headers = make_token()
    await onboard_resident(client, headers)
    me = await _me(client, headers)
    await client.post(
        "/admin/verify-user", json={"userId": me["id"], "verified": False},
        headers=headers,
    )
    assert (await _me(client, headers))["verified"] is False

    res = await client.post("/verify-me", headers=headers)
    assert res.status_code == 200
    assert res.json()["message"] == "Profile verified successfully!"
    assert res.json()["profile"]["verified"] is True
    assert (await _me(client, headers))["verified"] is True


async def test_admin_verify_requires_a_target(client, make_token):
    res = await client.post("/admin/verify-user", json={}, headers=make_token())
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "PRECONDITION_FAILED"


async def test_admin_verify_requires_authentication(client):
    res = await client.post("/admin/verify-user", json={"userId": str(uuid4())})
    assert res.status_code == 401


async def test_admin_verify_unknown_auth_id(client, make_token):
    res = await client.post(
        "/admin/verify-user", json={"authId": str(uuid4())}, headers=make_token(),
    )
    assert res.status_code == 404
    assert res.json()["error"]["message"] == "User not found"


async def test_admin_verify_user_without_profile(client, make_token):
    target_subject = uuid4()
    target = make_token(subject=target_subject)
    await client.post("/select-role", json={"role": "RESIDENT"}, headers=target)

    res = await client.post(
        "/admin/verify-user", json={"authId": str(target_subject)},
        headers=make_token(),
    )
    assert res.status_code == 404
    assert res.json()["error"]["message"] == "Profile not found"


async def test_admin_unverify_by_auth_id(client, make_token):
    target_subject = uuid4()
    target = make_token(subject=target_subject)
    await onboard_resident(client, target)

    res = await client.post(
        "/admin/verify-user",
        json={"authId": str(target_subject), "verified": False},
        headers=make_token(),
    )
    assert res.status_code == 200
    assert res.json()["message"] == "User unverified successfully"
    assert (await _me(client, target))["verified"] is False
