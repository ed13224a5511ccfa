from typing import Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.api_key_repository import IApiKeyRepository
from src.domain.entities import ApiKey


class ApiKeyRepository(IApiKeyRepository):
    """Access key repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_key(self, api_key: str) -> Optional[ApiKey]:
        """Get access key record by its secret (indexed equality lookup)"""
        stmt = select(ApiKey).where(ApiKey.api_key == api_key)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_id(self, key_id: UUID) -> Optional[ApiKey]:
        """Get access key record by ID"""
        stmt = select(ApiKey).where(ApiKey.id == key_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, api_key: ApiKey) -> ApiKey:
        """Create a new access key record"""
        self.session.add(api_key)
        await self.session.flush()
        await self.session.refresh(api_key)
        return api_key

    async def update(self, api_key: ApiKey) -> ApiKey:
        """Update existing access key record"""
        self.session.add(api_key)
        await self.session.flush()
        await self.session.refresh(api_key)
        return api_key
