from abc import ABC, abstractmethod


class IPasswordHasher(ABC):
    """Password hashing interface - application layer"""

    @abstractmethod
    async def hash(self, password: str) -> str:
        """Hash a plain text password"""
        pass

    @abstractmethod
    async def compare(self, password: str, password_hash: str) -> bool:
        """Check a plain text password against a stored hash"""
        pass
