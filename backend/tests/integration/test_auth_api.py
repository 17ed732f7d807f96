"""API tests for login and bearer authentication."""

import pytest

from blockboard.domain.exceptions import UpstreamError


@pytest.mark.asyncio
async def test_login_returns_user_token_and_session_key(client):
    response = await client.post("/api/login", json={"js_code": "alice"})

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "Success"
    assert body["code"] == 200
    assert body["data"]["user"]["app_id"] == "openid-alice"
    assert body["data"]["user"]["sex"] == 0
    assert body["data"]["session_key"] == "session-alice"
    assert body["data"]["token"]


@pytest.mark.asyncio
async def test_login_twice_yields_same_user(client, login):
    first, _ = await login("alice")
    second, _ = await login("alice")

    assert first["id"] == second["id"]

    _, headers = await login("bob")
    listing = await client.get("/api/user", headers=headers)
    assert sorted(u["app_id"] for u in listing.json()["data"]["rows"]) == [
        "openid-alice",
        "openid-bob",
    ]


@pytest.mark.asyncio
async def test_login_without_code_is_400(client):
    response = await client.post("/api/login", json={})

    assert response.status_code == 400
    body = response.json()
    assert body["status"] == "Error"
    assert "js_code" in body["message"]


@pytest.mark.asyncio
async def test_login_upstream_failure_is_502(client, identity_provider):
    async def failing_exchange(code: str):
        raise UpstreamError("wechat", 40029, "invalid code")

    identity_provider.exchange_code = failing_exchange

    response = await client.post("/api/login", json={"js_code": "x"})

    assert response.status_code == 502
    body = response.json()
    assert body["code"] == 502
    assert "invalid code" in body["message"]


@pytest.mark.asyncio
async def test_missing_token_is_401(client):
    response = await client.get("/api/block")

    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"
    assert response.json() == {
        "status": "Error",
        "code": 401,
        "message": "Missing bearer token",
        "data": None,
    }


@pytest.mark.asyncio
async def test_invalid_token_is_401(client):
    response = await client.get("/api/block", headers={"Authorization": "Bearer nope"})

    assert response.status_code == 401
    assert response.json()["status"] == "Error"


@pytest.mark.asyncio
async def test_token_of_deleted_user_is_401(client, alice):
    user, headers = alice
    deleted = await client.delete(f"/api/user/delete/{user['id']}", headers=headers)
    assert deleted.status_code == 200

    response = await client.get("/api/block", headers=headers)
    assert response.status_code == 401
