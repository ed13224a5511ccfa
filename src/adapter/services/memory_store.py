"""
In-process key-value store with per-key expiry.

Used for CACHE_BACKEND=memory (single process, local development) and in
tests, where the clock can be replaced to simulate elapsed TTLs.
"""

import time
from typing import Callable, Dict, Optional, Tuple

from src.app.services.key_value_store import IKeyValueStore


class InMemoryKeyValueStore(IKeyValueStore):
    """IKeyValueStore held in a dict; expiry checked on access, expired keys swept on every write"""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self.clock = clock
        self._entries: Dict[str, Tuple[str, Optional[float]]] = {}

    def _live_value(self, key: str) -> Optional[str]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if expires_at is not None and self.clock() >= expires_at:
            del self._entries[key]
            return None
        return value

    async def get(self, key: str) -> Optional[str]:
        return self._live_value(key)

    def _sweep(self) -> None:
        now = self.clock()
        expired = [
            key
            for key, (_, expires_at) in self._entries.items()
            if expires_at is not None and now >= expires_at
        ]
        for key in expired:
            del self._entries[key]

    async def set(self, key: str, value: str, ttl_seconds: Optional[int] = None) -> None:
        self._sweep()
        expires_at = self.clock() + ttl_seconds if ttl_seconds else None
        self._entries[key] = (value, expires_at)

    async def delete(self, key: str) -> None:
        self._entries.pop(key, None)

    async def exists(self, key: str) -> bool:
        return self._live_value(key) is not None

    async def close(self) -> None:
        self._entries.clear()
