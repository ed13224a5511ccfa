import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_me_returns_session_identity(client: AsyncClient, api_key, registered_user):
    login = await client.post("/api/auth/login", json=registered_user, headers=api_key)
    token = login.json()["sessionToken"]

    response = await client.get("/api/auth/me", headers={**api_key, "X-Session-Token": token})

    assert response.status_code == 200
    data = response.json()
    assert data["email"] == registered_user["email"]
    assert "timestamp" in data


@pytest.mark.asyncio
async def test_me_without_session(client: AsyncClient, api_key):
    response = await client.get("/api/auth/me", headers=api_key)

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "SESSION_INVALID"


@pytest.mark.asyncio
async def test_me_after_expiry(client: AsyncClient, api_key, registered_user, clock):
    login = await client.post("/api/auth/login", json=registered_user, headers=api_key)
    token = login.json()["sessionToken"]
    clock.advance(61)

    response = await client.get("/api/auth/me", headers={**api_key, "X-Session-Token": token})

    assert response.status_code == 401
