"""
Access Key Validator

Admission decision for calling clients based on an opaque access key.
Validation fails closed: lookup errors and timeouts reject the key.
"""

import asyncio
import logging
import secrets
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Iterable, List, Optional
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ApiKey

logger = logging.getLogger(__name__)

MASK_CHAR = "*"


@dataclass(frozen=True)
class IssuedApiKey:
    key_id: UUID
    api_key: str
    client_name: str
    permissions: List[str]


def mask_key(key: str) -> str:
    """Keep the first and last 4 chars of a key; keys of 8 chars or fewer are fully masked"""
    if len(key) <= 8:
        return MASK_CHAR * len(key)
    return key[:4] + MASK_CHAR * (len(key) - 8) + key[-4:]


def generate_api_key() -> str:
    """Generate a 64-character hex access key (256 bits)"""
    return secrets.token_hex(32)


class AccessKeyValidator:
    """
    Validates, looks up and issues access keys.

    Business Rules:
    - Unknown, inactive or unreadable keys are rejected, never raised
    - last_used_at is refreshed on success; failing to record it does not
      reject the key
    - Secrets are returned once at creation and never logged unmasked
    """

    def __init__(self, uow: UnitOfWork, timeout_seconds: float = 5.0):
        self.uow = uow
        self.timeout_seconds = timeout_seconds

    async def validate(self, key: str) -> bool:
        if not key:
            return False

        try:
            return await asyncio.wait_for(self._validate(key), self.timeout_seconds)
        except asyncio.TimeoutError:
            logger.error(f"API key validation timed out: {mask_key(key)}")
            return False
        except Exception as e:
            logger.error(f"API key validation error: {e}")
            return False

    async def _validate(self, key: str) -> bool:
        async with self.uow:
            record = await self.uow.api_keys.get_by_key(key)

            if record is None:
                logger.warning(f"API key not found: {mask_key(key)}")
                return False

            client_name = record.client_name
            if not record.is_active:
                logger.warning(f"API key inactive for client: {client_name}")
                return False

            await self._record_usage(record, client_name)

            logger.info(f"API key validated for client: {client_name}")
            return True

    async def _record_usage(self, record: ApiKey, client_name: str) -> None:
        try:
            record.last_used_at = datetime.now(UTC)
            await self.uow.api_keys.update(record)
            await self.uow.commit()
        except Exception as e:
            logger.warning(f"Failed to record API key usage for client {client_name}: {e}")
            await self.uow.rollback()

    async def client_name_for(self, key: str) -> Optional[str]:
        """Read-only lookup used for request attribution"""
        try:
            return await asyncio.wait_for(self._client_name_for(key), self.timeout_seconds)
        except asyncio.TimeoutError:
            logger.error(f"API key lookup timed out: {mask_key(key)}")
            return None
        except Exception as e:
            logger.error(f"API key lookup error: {e}")
            return None

    async def _client_name_for(self, key: str) -> Optional[str]:
        async with self.uow:
            record = await self.uow.api_keys.get_by_key(key)
            return record.client_name if record else None

    async def create_key(self, client_name: str, permissions: Iterable[str] = ()) -> str:
        """
        Issue a new active access key.

        Args:
            client_name: Name of the calling client the key belongs to
            permissions: Reserved permission labels

        Returns:
            The 64 hex char secret; it cannot be read back afterwards
        """
        issued = await self.issue_key(client_name, permissions)
        return issued.api_key

    async def issue_key(self, client_name: str, permissions: Iterable[str] = ()) -> IssuedApiKey:
        """Same as create_key, also returning the record ID for later deactivation"""
        secret = generate_api_key()
        async with self.uow:
            record = await self.uow.api_keys.create(
                ApiKey(
                    api_key=secret,
                    client_name=client_name,
                    is_active=True,
                    permissions=sorted(set(permissions)),
                )
            )
            issued = IssuedApiKey(
                key_id=record.id,
                api_key=secret,
                client_name=client_name,
                permissions=list(record.permissions),
            )
            await self.uow.commit()

        logger.info(f"API key created for client {client_name}: {mask_key(secret)}")
        return issued

    async def deactivate_key(self, key_id: UUID) -> bool:
        """Clear the active flag. Returns False when no such key exists."""
        async with self.uow:
            record = await self.uow.api_keys.get_by_id(key_id)
            if record is None:
                return False

            client_name = record.client_name
            record.is_active = False
            await self.uow.api_keys.update(record)
            await self.uow.commit()

        logger.info(f"API key deactivated for client: {client_name}")
        return True
