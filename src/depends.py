from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.services.bcrypt_hasher import BcryptPasswordHasher
from src.adapter.services.memory_store import InMemoryKeyValueStore
from src.adapter.services.redis_store import RedisKeyValueStore
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.access_key_validator import AccessKeyValidator
from src.app.services.encryption_codec import EncryptionCodec
from src.app.services.key_value_store import IKeyValueStore
from src.app.services.password_hasher import IPasswordHasher
from src.app.services.session_store import SessionStore


def build_engine(config) -> AsyncEngine:
    return create_async_engine(config.DB_URI, echo=False, future=True)


def build_session_factory(engine: AsyncEngine) -> sessionmaker:
    return sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )


def build_key_value_store(config) -> IKeyValueStore:
    if config.CACHE_BACKEND == "memory":
        return InMemoryKeyValueStore()
    if config.CACHE_BACKEND == "redis":
        return RedisKeyValueStore.from_url(config.REDIS_URL, config.REDIS_TIMEOUT_SECONDS)
    raise ValueError(f"Unknown CACHE_BACKEND: {config.CACHE_BACKEND}")


def build_encryption_codec(config) -> EncryptionCodec:
    return EncryptionCodec(config.ENCRYPTION_KEY, config.ENCRYPTION_ALGORITHM)


def get_config(request: Request):
    return request.app.state.config


async def get_unit_of_work(request: Request):
    async with request.app.state.session_factory() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_key_value_store(request: Request) -> IKeyValueStore:
    return request.app.state.key_value_store


def get_session_store(store: IKeyValueStore = Depends(get_key_value_store)) -> SessionStore:
    return SessionStore(store)


def get_encryption_codec(request: Request) -> EncryptionCodec:
    return request.app.state.encryption_codec


def get_password_hasher(config=Depends(get_config)) -> IPasswordHasher:
    return BcryptPasswordHasher(rounds=config.BCRYPT_ROUNDS)


def get_access_key_validator(
    uow=Depends(get_unit_of_work), config=Depends(get_config)
) -> AccessKeyValidator:
    return AccessKeyValidator(uow, timeout_seconds=config.GATE_TIMEOUT_SECONDS)
