import pytest
from unittest.mock import AsyncMock, MagicMock

from src.adapter.services.memory_store import InMemoryKeyValueStore
from src.app.services.session_store import SessionStore
from tests.utils.fake_clock import FakeClock


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    return uow


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def kv_store(clock):
    return InMemoryKeyValueStore(clock=clock)


@pytest.fixture
def session_store(kv_store):
    return SessionStore(kv_store)
