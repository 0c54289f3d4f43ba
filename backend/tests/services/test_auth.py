"""Authentication — bearer token resolution on protected endpoints.

Invariants:
    - Missing header → 401 "No token provided"
    - Bad signature, expired, wrong audience, non-UUID subject → 401 "Invalid token"
    - Public endpoints never require a token
"""

from jose import jwt


async def test_missing_token_is_rejected(client):
    res = await client.get("/me")
    assert res.status_code == 401
    assert res.json()["error"]["message"] == "No token provided"


async def test_non_bearer_scheme_is_rejected(client):
    res = await client.get("/me", headers={"Authorization": "Basic dXNlcjpwYXNz"})
    assert res.status_code == 401


async def test_garbage_token_is_rejected(client):
    res = await client.get("/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "UNAUTHENTICATED"
    assert res.json()["error"]["message"] == "Invalid token"


async def test_expired_token_is_rejected(client, make_token):
    res = await client.get("/me", headers=make_token(expires_in=-60))
    assert res.status_code == 401


async def test_wrong_audience_is_rejected(client, make_token):
    res = await client.get("/me", headers=make_token(aud="someone-else"))
    assert res.status_code == 401


async def test_non_uuid_subject_is_rejected(client, make_token):
    res = await client.get("/me", headers=make_token(subject="not-a-uuid"))
    assert res.status_code == 401


async def test_wrong_secret_is_rejected(client):
    token = jwt.encode(
        {"sub": "5f0c2f5e-8f1b-4d8e-9a57-2f4f1d6b8c11", "aud": "authenticated"},
        "some-other-secret", algorithm="HS256",
    )
    res = await client.get("/me", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 401


async def test_public_endpoints_need_no_token(client):
    for path in ("/services", "/requirements", "/languages", "/health"):
        res = await client.get(path)
        assert res.status_code == 200, path
