from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import ApiKey


class IApiKeyRepository(ABC):
    """Access key repository interface - application layer"""

    @abstractmethod
    async def get_by_key(self, api_key: str) -> Optional[ApiKey]:
        """Get access key record by its secret"""
        pass

    @abstractmethod
    async def get_by_id(self, key_id: UUID) -> Optional[ApiKey]:
        """Get access key record by ID"""
        pass

    @abstractmethod
    async def create(self, api_key: ApiKey) -> ApiKey:
        """Create a new access key record"""
        pass

    @abstractmethod
    async def update(self, api_key: ApiKey) -> ApiKey:
        """Update existing access key record"""
        pass
