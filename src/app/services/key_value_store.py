from abc import ABC, abstractmethod
from typing import Optional


class IKeyValueStore(ABC):
    """
    Key-value store interface - application layer

    Implementations must expire keys on their own (per-key TTL, not renewed
    on read) and make get/set/delete atomic per key. No multi-key
    transaction is assumed.
    """

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Get value by key, None when absent or expired"""
        pass

    @abstractmethod
    async def set(self, key: str, value: str, ttl_seconds: Optional[int] = None) -> None:
        """Set value, expiring after ttl_seconds when given"""
        pass

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Delete key; no-op when absent"""
        pass

    @abstractmethod
    async def exists(self, key: str) -> bool:
        """Check whether key is present"""
        pass

    async def close(self) -> None:
        """Release connections held by the store"""
        pass
