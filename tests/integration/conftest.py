import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.services.memory_store import InMemoryKeyValueStore
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.encryption_codec import EncryptionCodec
from src.depends import get_key_value_store, get_unit_of_work
from src.domain.entities import ApiKey
from tests.utils.fake_clock import FakeClock

TEST_DB_URI = "sqlite+aiosqlite:///./test.db"
CLIENT_API_KEY = "f" * 64
ADMIN_API_KEY = "integration-admin-key"


class IntegrationConfig(ApplicationConfig):
    DB_URI = TEST_DB_URI
    AUTO_CREATE_TABLES = False
    CACHE_BACKEND = "memory"
    ENABLE_LOGGING_MIDDLEWARE = False
    BCRYPT_ROUNDS = 4
    SESSION_TTL_SECONDS = 60
    ADMIN_API_KEY = ADMIN_API_KEY


@pytest_asyncio.fixture
async def engine():
    # Registers the table models on SQLModel.metadata
    import src.domain.entities  # noqa: F401

    engine = create_async_engine(TEST_DB_URI)
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def kv_store(clock):
    return InMemoryKeyValueStore(clock=clock)


@pytest.fixture
def codec():
    return EncryptionCodec(IntegrationConfig.ENCRYPTION_KEY, IntegrationConfig.ENCRYPTION_ALGORITHM)


@pytest.fixture
def app(db_session, kv_store):
    from src.api.app import create_app

    app = create_app(IntegrationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_key_value_store] = lambda: kv_store
    return app


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def api_key(db_session):
    """An active client access key, returned as the header dict to send"""
    db_session.add(ApiKey(api_key=CLIENT_API_KEY, client_name="integration-client"))
    await db_session.commit()
    return {"X-API-Key": CLIENT_API_KEY}


@pytest.fixture
def admin_headers():
    return {"X-Admin-API-Key": ADMIN_API_KEY}


@pytest_asyncio.fixture
async def registered_user(client: AsyncClient, api_key):
    response = await client.post(
        "/api/auth/signup",
        json={"email": "user@acme.com", "encryptedPassword": "SecurePass123!"},
        headers=api_key,
    )
    assert response.status_code == 200
    assert response.json()["success"] is True
    return {"email": "user@acme.com", "password": "SecurePass123!"}
