import re

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_successful_login(client: AsyncClient, api_key, registered_user):
    """
    Given a registered user
    When I submit login with correct email and password
    Then I receive a fresh 64 hex char session token
    And the token verifies as valid
    """
    response = await client.post("/api/auth/login", json=registered_user, headers=api_key)

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["message"] == "Login successful"
    assert re.fullmatch(r"[0-9a-f]{64}", data["sessionToken"])

    verify = await client.post(
        "/api/auth/verify", json={"sessionToken": data["sessionToken"]}, headers=api_key
    )
    assert verify.json()["valid"] is True


@pytest.mark.asyncio
async def test_login_incorrect_password(client: AsyncClient, api_key, registered_user):
    """
    Given a registered user
    When I submit login with a wrong password
    Then the response is a business failure, not an HTTP error
    And no session token is issued
    """
    response = await client.post(
        "/api/auth/login",
        json={"email": registered_user["email"], "password": "WrongPassword!"},
        headers=api_key,
    )

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is False
    assert data["code"] == "INCORRECT_PASSWORD"
    assert data["message"] == "Password is incorrect"
    assert "sessionToken" not in data


@pytest.mark.asyncio
async def test_login_unknown_email(client: AsyncClient, api_key):
    response = await client.post(
        "/api/auth/login",
        json={"email": "nobody@acme.com", "password": "SecurePass123!"},
        headers=api_key,
    )

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is False
    assert data["code"] == "EMAIL_NOT_FOUND"
    assert data["message"] == "Email address not found in the system"


@pytest.mark.asyncio
async def test_login_missing_fields(client: AsyncClient, api_key):
    response = await client.post("/api/auth/login", json={}, headers=api_key)

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is False
    assert data["code"] == "MISSING_INFORMATION"


@pytest.mark.asyncio
async def test_login_non_object_body(client: AsyncClient, api_key):
    response = await client.post("/api/auth/login", json=["not", "an", "object"], headers=api_key)

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_REQUEST"
