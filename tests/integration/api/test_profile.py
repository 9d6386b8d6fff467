import pytest

from tests.fixtures.api_helpers import auth_headers, register_user

AVATAR = "data:image/png;base64,iVBORw0KGgo="


@pytest.mark.asyncio
async def test_me(client, customer):
    response = await client.get("/api/v1/me", headers=auth_headers(customer["token"]))

    assert response.status_code == 200
    user = response.json()["user"]
    assert user["id"] == customer["id"]
    assert user["name"] == "Jane"
    assert user["avatar"] is None


@pytest.mark.asyncio
async def test_update_profile(client, customer):
    response = await client.put(
        "/api/v1/me/update",
        json={"name": "Jane Doe", "email": "jane.doe@example.com"},
        headers=auth_headers(customer["token"]),
    )

    assert response.status_code == 200
    assert response.json()["user"]["name"] == "Jane Doe"
    assert response.json()["user"]["email"] == "jane.doe@example.com"


@pytest.mark.asyncio
async def test_update_profile_to_taken_email(client, customer):
    await register_user(client, name="Bob", email="bob@example.com")

    response = await client.put(
        "/api/v1/me/update",
        json={"name": "Jane", "email": "bob@example.com"},
        headers=auth_headers(customer["token"]),
    )

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "EMAIL_ALREADY_EXISTS"


@pytest.mark.asyncio
async def test_update_profile_cannot_change_role(client, customer):
    response = await client.put(
        "/api/v1/me/update",
        json={"name": "Jane", "email": "jane@example.com", "role": "admin"},
        headers=auth_headers(customer["token"]),
    )

    assert response.status_code == 200
    assert response.json()["user"]["role"] == "user"


@pytest.mark.asyncio
async def test_upload_and_replace_avatar(client, object_storage, customer):
    headers = auth_headers(customer["token"])

    first = await client.put("/api/v1/me/upload_avatar", json={"avatar": AVATAR}, headers=headers)
    assert first.status_code == 200
    first_avatar = first.json()["user"]["avatar"]
    assert first_avatar["public_id"].startswith("avatars/")
    assert object_storage.deleted == []

    second = await client.put("/api/v1/me/upload_avatar", json={"avatar": AVATAR}, headers=headers)
    assert second.status_code == 200
    assert second.json()["user"]["avatar"]["public_id"] != first_avatar["public_id"]
    assert object_storage.deleted == [first_avatar["public_id"]]


@pytest.mark.asyncio
async def test_avatar_upload_failure(client, object_storage, customer):
    object_storage.fail_upload = True

    response = await client.put(
        "/api/v1/me/upload_avatar",
        json={"avatar": AVATAR},
        headers=auth_headers(customer["token"]),
    )

    assert response.status_code == 500
    assert response.json()["error"]["code"] == "UPLOAD_FAILED"
