"""Tests for user router.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import pytest
from httpx import AsyncClient
from starlette import status

from tests.fakes import GROUP_BASE_DN


@pytest.mark.asyncio
async def test_get_users(http_client: AsyncClient) -> None:
    response = await http_client.get("/users")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert [user["user_name"] for user in data] == ["alice", "bob"]
    assert data[0]["created"].startswith("2019-12-26T15:45:54")


@pytest.mark.asyncio
async def test_user_exists(http_client: AsyncClient) -> None:
    response = await http_client.get("/users/alice/exists")
    assert response.json() is True

    response = await http_client.get("/users/nobody/exists")
    assert response.json() is False


@pytest.mark.asyncio
async def test_get_user_not_found(http_client: AsyncClient) -> None:
    response = await http_client.get("/users/nobody")
    assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.asyncio
async def test_add_user(http_client: AsyncClient) -> None:
    """Test user creation with groups and conflict on repeat."""
    payload = {
        "user_name": "carol",
        "password": "Passw0rd!",
        "display_name": "Carol",
        "email": "carol@example.org",
        "groups": ["admins"],
    }

    response = await http_client.post("/users", json=payload)

    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["user_name"] == "carol"
    assert data["enabled"] is True
    assert data["groups"] == [f"cn=admins,{GROUP_BASE_DN}"]
    assert "password" not in data

    response = await http_client.post("/users", json=payload)
    assert response.status_code == status.HTTP_409_CONFLICT


@pytest.mark.asyncio
async def test_add_user_requires_password(http_client: AsyncClient) -> None:
    response = await http_client.post("/users", json={"user_name": "dave"})
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


@pytest.mark.asyncio
async def test_update_user(http_client: AsyncClient) -> None:
    response = await http_client.put(
        "/users/bob",
        json={"display_name": "Bob", "enabled": True, "groups": ["staff"]},
    )

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["display_name"] == "Bob"
    assert data["enabled"] is True
    assert data["groups"] == [f"cn=staff,{GROUP_BASE_DN}"]


@pytest.mark.asyncio
async def test_update_user_without_groups(http_client: AsyncClient) -> None:
    response = await http_client.put(
        "/users/alice",
        params={"update_groups": False},
        json={"display_name": "Alice"},
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["groups"] == [f"cn=admins,{GROUP_BASE_DN}"]


@pytest.mark.asyncio
async def test_update_user_groups(http_client: AsyncClient) -> None:
    response = await http_client.put(
        "/users/alice/groups",
        json={"values": ["staff"]},
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["groups"] == [f"cn=staff,{GROUP_BASE_DN}"]

    response = await http_client.get("/groups/admins")
    assert response.json()["members"] == []


@pytest.mark.asyncio
async def test_update_user_password(http_client: AsyncClient) -> None:
    await http_client.post(
        "/users",
        json={"user_name": "carol", "password": "old"},
    )

    response = await http_client.put(
        "/users/carol/password",
        json={"value": "new"},
    )
    assert response.status_code == status.HTTP_204_NO_CONTENT

    response = await http_client.put(
        "/users/nobody/password",
        json={"value": "new"},
    )
    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR


@pytest.mark.asyncio
async def test_delete_user(http_client: AsyncClient) -> None:
    response = await http_client.delete("/users/bob")
    assert response.status_code == status.HTTP_200_OK

    response = await http_client.get("/users/bob/exists")
    assert response.json() is False
