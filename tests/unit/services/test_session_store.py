import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.app.services.session_store import SessionStatus, SessionStore
from src.app.services.tokens import generate_session_token

TTL = 86400


@pytest.mark.asyncio
async def test_never_issued_token_is_invalid(session_store):
    status = await session_store.check_session_status(generate_session_token())

    assert status == SessionStatus(valid=False, expired=False)


@pytest.mark.asyncio
async def test_fresh_session_is_valid(session_store):
    token = generate_session_token()
    await session_store.store_session(token, {"email": "u@x.com"}, TTL)

    status = await session_store.check_session_status(token)

    assert status == SessionStatus(valid=True, expired=False)


@pytest.mark.asyncio
async def test_session_expired_after_primary_ttl(session_store, clock):
    token = generate_session_token()
    await session_store.store_session(token, {"email": "u@x.com"}, TTL)

    clock.advance(TTL)

    assert await session_store.check_session_status(token) == SessionStatus(
        valid=False, expired=True
    )


@pytest.mark.asyncio
async def test_session_invalid_after_metadata_ttl(session_store, clock):
    token = generate_session_token()
    await session_store.store_session(token, {"email": "u@x.com"}, TTL)

    clock.advance(TTL * 2)

    assert await session_store.check_session_status(token) == SessionStatus(
        valid=False, expired=False
    )


@pytest.mark.asyncio
async def test_records_written_with_dual_ttl(kv_store, session_store, clock):
    token = generate_session_token()
    await session_store.store_session(token, {"email": "u@x.com"}, TTL)

    assert json.loads(await kv_store.get(f"session:{token}")) == {"email": "u@x.com"}
    metadata = json.loads(await kv_store.get(f"session:metadata:{token}"))
    assert metadata["token"] == token
    assert set(metadata) == {"createdAt", "expiresAt", "token"}

    clock.advance(TTL * 2 - 1)
    assert await kv_store.exists(f"session:{token}") is False
    assert await kv_store.exists(f"session:metadata:{token}") is True


@pytest.mark.asyncio
async def test_primary_only_counts_as_valid(kv_store, session_store):
    token = generate_session_token()
    await kv_store.set(f"session:{token}", json.dumps({"email": "u@x.com"}), TTL)

    assert await session_store.check_session_status(token) == SessionStatus(
        valid=True, expired=False
    )


@pytest.mark.asyncio
async def test_metadata_not_read_when_primary_present():
    store = MagicMock()
    store.get = AsyncMock(return_value='{"email": "u@x.com"}')
    session_store = SessionStore(store)

    await session_store.check_session_status("a" * 64)

    store.get.assert_awaited_once_with("session:" + "a" * 64)


@pytest.mark.asyncio
async def test_metadata_vanishing_between_reads_is_invalid():
    store = MagicMock()
    store.get = AsyncMock(side_effect=[None, None])
    session_store = SessionStore(store)

    status = await session_store.check_session_status("a" * 64)

    assert status == SessionStatus(valid=False, expired=False)
    assert store.get.await_count == 2


@pytest.mark.asyncio
async def test_delete_session_removes_both_records(session_store):
    token = generate_session_token()
    await session_store.store_session(token, {"email": "u@x.com"}, TTL)

    await session_store.delete_session(token)

    assert await session_store.check_session_status(token) == SessionStatus(
        valid=False, expired=False
    )


@pytest.mark.asyncio
async def test_delete_session_attempts_both_when_first_fails():
    store = MagicMock()
    store.delete = AsyncMock(side_effect=[ConnectionError("down"), None])
    session_store = SessionStore(store)

    with pytest.raises(ConnectionError):
        await session_store.delete_session("a" * 64)

    deleted_keys = [call.args[0] for call in store.delete.await_args_list]
    assert deleted_keys == ["session:" + "a" * 64, "session:metadata:" + "a" * 64]


@pytest.mark.asyncio
async def test_delete_absent_session_is_noop(session_store):
    await session_store.delete_session(generate_session_token())


@pytest.mark.asyncio
async def test_get_session_reads_primary_only(kv_store, session_store, clock):
    token = generate_session_token()
    await session_store.store_session(token, {"email": "u@x.com"}, TTL)

    assert await session_store.get_session(token) == {"email": "u@x.com"}

    clock.advance(TTL)
    assert await session_store.get_session(token) is None
