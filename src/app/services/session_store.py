"""
Session Store

Keeps each session as two records in the key-value store:

- ``session:<token>`` holds the session payload and expires after the
  session TTL
- ``session:metadata:<token>`` holds bookkeeping and expires after twice
  the session TTL

Reading them in order gives a three-way status:

    primary present                 -> valid
    primary absent, metadata present -> expired
    both absent                      -> invalid

Expiry is left entirely to the store's native TTL eviction. A crash between
the two writes in ``store_session`` can leave only the primary record; that
state still reads as valid.
"""

import asyncio
import json
import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Optional

from src.app.services.key_value_store import IKeyValueStore
from src.domain.entities import SessionMetadataRecord

logger = logging.getLogger(__name__)

SESSION_KEY_PREFIX = "session:"
METADATA_KEY_PREFIX = "session:metadata:"


@dataclass(frozen=True)
class SessionStatus:
    valid: bool
    expired: bool


def session_key(token: str) -> str:
    return f"{SESSION_KEY_PREFIX}{token}"


def metadata_key(token: str) -> str:
    return f"{METADATA_KEY_PREFIX}{token}"


class SessionStore:
    """Dual-record session bookkeeping on top of an IKeyValueStore"""

    def __init__(self, store: IKeyValueStore):
        self.store = store

    async def store_session(self, token: str, payload: dict, ttl_seconds: int) -> None:
        """
        Write the session record and its metadata record.

        Args:
            token: Session token (64 hex chars)
            payload: JSON-serializable session data
            ttl_seconds: Session lifetime; metadata lives twice as long
        """
        now = datetime.now(UTC)
        metadata = SessionMetadataRecord(
            created_at=now,
            expires_at=now + timedelta(seconds=ttl_seconds),
            token=token,
        )

        await self.store.set(session_key(token), json.dumps(payload), ttl_seconds)
        await self.store.set(
            metadata_key(token),
            metadata.model_dump_json(by_alias=True),
            ttl_seconds * 2,
        )

    async def check_session_status(self, token: str) -> SessionStatus:
        """
        Classify a token as valid, expired or invalid.

        The primary record is read first and is authoritative. The metadata
        record is only consulted when the primary one is gone; if it expires
        between the two reads the token is reported invalid.
        """
        if await self.store.get(session_key(token)) is not None:
            return SessionStatus(valid=True, expired=False)

        if await self.store.get(metadata_key(token)) is not None:
            return SessionStatus(valid=False, expired=True)

        return SessionStatus(valid=False, expired=False)

    async def get_session(self, token: str) -> Optional[dict]:
        """Read the primary session payload, None when absent"""
        raw = await self.store.get(session_key(token))
        if raw is None:
            return None
        return json.loads(raw)

    async def delete_session(self, token: str) -> None:
        """
        Delete both records.

        Both deletes are always attempted; the first failure is raised once
        both have run.
        """
        results = await asyncio.gather(
            self.store.delete(session_key(token)),
            self.store.delete(metadata_key(token)),
            return_exceptions=True,
        )
        errors = [r for r in results if isinstance(r, Exception)]
        if errors:
            logger.warning(
                f"Session delete partially failed ({len(errors)} of 2) "
                f"for token {token[:8]}..."
            )
            raise errors[0]
