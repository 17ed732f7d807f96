"""API tests for the /api/user endpoints."""

import uuid

import pytest


def _new_user(app_id: str, **overrides) -> dict:
    payload = {
        "name": "Carol",
        "sex": "1",
        "email": f"{app_id}@example.com",
        "phone": "13800000000",
        "app_id": app_id,
    }
    payload.update(overrides)
    return payload


@pytest.mark.asyncio
async def test_create_user_returns_201_with_null_data(client, alice):
    _, headers = alice

    response = await client.post("/api/user/new", json=_new_user("wx-carol"), headers=headers)

    assert response.status_code == 201
    assert response.json() == {
        "status": "Success",
        "code": 201,
        "message": "User created successfully",
        "data": None,
    }


@pytest.mark.asyncio
async def test_create_user_with_non_numeric_sex_is_400(client, alice):
    _, headers = alice

    response = await client.post(
        "/api/user/new", json=_new_user("wx-x", sex="female"), headers=headers
    )

    assert response.status_code == 400
    assert response.json()["message"] == "sex must be a number"


@pytest.mark.asyncio
async def test_create_user_with_taken_app_id_is_409(client, alice):
    _, headers = alice

    response = await client.post(
        "/api/user/new", json=_new_user("openid-alice"), headers=headers
    )

    assert response.status_code == 409
    assert response.json()["status"] == "Error"


@pytest.mark.asyncio
async def test_get_user(client, alice):
    user, headers = alice

    response = await client.get(f"/api/user/{user['id']}", headers=headers)

    assert response.status_code == 200
    assert response.json()["data"]["app_id"] == "openid-alice"


@pytest.mark.asyncio
async def test_get_unknown_user_is_404(client, alice):
    _, headers = alice

    response = await client.get(f"/api/user/{uuid.uuid4()}", headers=headers)

    assert response.status_code == 404
    assert response.json() == {
        "status": "Error",
        "code": 404,
        "message": "User not found",
        "data": None,
    }


@pytest.mark.asyncio
async def test_get_user_by_email(client, alice):
    _, headers = alice
    await client.post("/api/user/new", json=_new_user("wx-carol"), headers=headers)

    response = await client.get("/api/user/email/wx-carol@example.com", headers=headers)

    assert response.status_code == 200
    assert response.json()["data"]["app_id"] == "wx-carol"


@pytest.mark.asyncio
async def test_get_user_by_unknown_email_is_404(client, alice):
    _, headers = alice

    response = await client.get("/api/user/email/nobody@example.com", headers=headers)

    assert response.status_code == 404
    assert response.json()["message"] == "User not found"


@pytest.mark.asyncio
async def test_malformed_user_id_is_400(client, alice):
    _, headers = alice

    response = await client.get("/api/user/not-a-uuid", headers=headers)

    assert response.status_code == 400
    assert response.json()["code"] == 400


@pytest.mark.asyncio
async def test_update_user_replaces_profile(client, alice):
    user, headers = alice

    response = await client.post(
        f"/api/user/update/{user['id']}",
        json={"name": "Alice", "sex": 2, "email": "alice@example.com"},
        headers=headers,
    )
    assert response.status_code == 200
    assert response.json()["data"] is None

    fetched = (await client.get(f"/api/user/{user['id']}", headers=headers)).json()["data"]
    assert fetched["name"] == "Alice"
    assert fetched["sex"] == 2
    assert fetched["email"] == "alice@example.com"
    assert fetched["phone"] is None
    assert fetched["app_id"] == "openid-alice"


@pytest.mark.asyncio
async def test_update_unknown_user_is_404(client, alice):
    _, headers = alice

    response = await client.post(
        f"/api/user/update/{uuid.uuid4()}", json={"name": "x"}, headers=headers
    )

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_unknown_user_is_200(client, alice):
    _, headers = alice

    response = await client.delete(f"/api/user/delete/{uuid.uuid4()}", headers=headers)

    assert response.status_code == 200
    assert response.json()["status"] == "Success"


@pytest.mark.asyncio
async def test_list_users_paginates(client, alice):
    _, headers = alice
    for i in range(6):
        created = await client.post(
            "/api/user/new", json=_new_user(f"wx-{i}"), headers=headers
        )
        assert created.status_code == 201

    first = (await client.get("/api/user", headers=headers)).json()["data"]
    assert len(first["rows"]) == 5
    assert first["num_pages"] == 2

    second = (
        await client.get("/api/user", params={"page": 2, "posts_per_page": 5}, headers=headers)
    ).json()["data"]
    assert len(second["rows"]) == 2

    ids = [u["id"] for u in first["rows"] + second["rows"]]
    assert len(set(ids)) == 7


@pytest.mark.asyncio
async def test_page_zero_is_400(client, alice):
    _, headers = alice

    response = await client.get("/api/user", params={"page": 0}, headers=headers)

    assert response.status_code == 400
    assert response.json()["status"] == "Error"


@pytest.mark.asyncio
@pytest.mark.parametrize("page", [10**19, 2**62])
async def test_page_beyond_offset_range_is_400(client, alice, page):
    _, headers = alice

    response = await client.get("/api/user", params={"page": page}, headers=headers)

    assert response.status_code == 400
    assert response.json() == {
        "status": "Error",
        "code": 400,
        "message": "page is out of range",
        "data": None,
    }


@pytest.mark.asyncio
async def test_zero_posts_per_page_is_400(client, alice):
    _, headers = alice

    response = await client.get("/api/user", params={"posts_per_page": 0}, headers=headers)

    assert response.status_code == 400
