import pytest


@pytest.mark.asyncio
async def test_value_expires_after_ttl(kv_store, clock):
    await kv_store.set("k", "v", 10)

    clock.advance(9.9)
    assert await kv_store.get("k") == "v"

    clock.advance(0.1)
    assert await kv_store.get("k") is None
    assert await kv_store.exists("k") is False


@pytest.mark.asyncio
async def test_read_does_not_renew_ttl(kv_store, clock):
    await kv_store.set("k", "v", 10)

    for _ in range(5):
        clock.advance(1)
        await kv_store.get("k")

    clock.advance(5)
    assert await kv_store.get("k") is None


@pytest.mark.asyncio
async def test_value_without_ttl_persists(kv_store, clock):
    await kv_store.set("k", "v")

    clock.advance(10**9)

    assert await kv_store.exists("k") is True


@pytest.mark.asyncio
async def test_delete(kv_store):
    await kv_store.set("k", "v", 10)
    await kv_store.delete("k")
    await kv_store.delete("missing")

    assert await kv_store.get("k") is None


@pytest.mark.asyncio
async def test_write_evicts_expired_entries_never_read(kv_store, clock):
    for i in range(3):
        await kv_store.set(f"session:{i}", "v", 10)
    await kv_store.set("forever", "v")

    clock.advance(10)
    await kv_store.set("fresh", "v", 10)

    assert set(kv_store._entries) == {"forever", "fresh"}
