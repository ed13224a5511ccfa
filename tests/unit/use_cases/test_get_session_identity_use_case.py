import json
from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.app.services.session_store import SessionStore
from src.app.use_cases.auth import GetSessionIdentityUseCase, SessionIssuer

TOKEN = "ab" * 32


@pytest.mark.asyncio
async def test_identity_of_live_session(session_store):
    token = await SessionIssuer(session_store, 60).issue("user@acme.com")

    identity = await GetSessionIdentityUseCase(session_store).execute(token)

    assert identity is not None
    assert identity.email == "user@acme.com"
    assert identity.timestamp.tzinfo is not None
    assert identity.timestamp <= datetime.now(UTC)


@pytest.mark.asyncio
async def test_identity_of_expired_session_is_none(session_store, clock):
    token = await SessionIssuer(session_store, 60).issue("user@acme.com")
    clock.advance(61)

    assert await GetSessionIdentityUseCase(session_store).execute(token) is None


@pytest.mark.asyncio
@pytest.mark.parametrize("token", ["", None, "not-a-token"])
async def test_identity_of_malformed_token_is_none(session_store, token):
    assert await GetSessionIdentityUseCase(session_store).execute(token) is None


@pytest.mark.asyncio
async def test_identity_of_unreadable_record_is_none(session_store, kv_store):
    await kv_store.set(f"session:{TOKEN}", json.dumps({"user": "no email here"}), 60)

    assert await GetSessionIdentityUseCase(session_store).execute(TOKEN) is None


@pytest.mark.asyncio
async def test_identity_of_corrupt_json_is_none(session_store, kv_store):
    await kv_store.set(f"session:{TOKEN}", "{not json", 60)

    assert await GetSessionIdentityUseCase(session_store).execute(TOKEN) is None


@pytest.mark.asyncio
async def test_identity_store_failure_is_none():
    store = MagicMock(spec=SessionStore)
    store.get_session = AsyncMock(side_effect=ConnectionError("redis down"))

    assert await GetSessionIdentityUseCase(store).execute(TOKEN) is None
