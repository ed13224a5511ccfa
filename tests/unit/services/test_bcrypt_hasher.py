import pytest

from src.adapter.services.bcrypt_hasher import BcryptPasswordHasher


@pytest.fixture
def hasher():
    return BcryptPasswordHasher(rounds=4)


@pytest.mark.asyncio
async def test_hash_and_compare(hasher):
    password_hash = await hasher.hash("SecurePass123!")

    assert password_hash.startswith("$2")
    assert await hasher.compare("SecurePass123!", password_hash) is True
    assert await hasher.compare("WrongPassword!", password_hash) is False


@pytest.mark.asyncio
async def test_password_longer_than_72_bytes(hasher):
    password = "p" * 100
    password_hash = await hasher.hash(password)

    assert await hasher.compare(password, password_hash) is True
    # Characters past byte 72 still count
    assert await hasher.compare("p" * 99 + "q", password_hash) is False


@pytest.mark.asyncio
async def test_multibyte_password(hasher):
    password = "Żółć東京" * 10
    password_hash = await hasher.hash(password)

    assert await hasher.compare(password, password_hash) is True


@pytest.mark.asyncio
async def test_malformed_stored_hash_does_not_match(hasher):
    assert await hasher.compare("SecurePass123!", "not-a-bcrypt-hash") is False
