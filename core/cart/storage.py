"""Session store backends: session key -> CartRecord."""
import json
import os
from typing import Optional, Protocol

from core.db import get_redis, RedisKeys
from core.errors import ConfigurationError
from core.logging import get_logger, sanitize_id_for_logging
from .models import CartRecord

logger = get_logger(__name__)


class SessionStore(Protocol):
    """Keyed store of cart records."""

    async def get(self, session_key: str) -> Optional[CartRecord]:
        """Return the record for `session_key`, if any."""

    async def put(self, session_key: str, record: CartRecord) -> None:
        """Store `record` under `session_key`, replacing any prior entry."""


class MemorySessionStore:
    """
    Process-lifetime dict store.

    No eviction and no size bound; contents vanish on restart.
    """

    def __init__(self):
        self._records: dict[str, CartRecord] = {}

    async def get(self, session_key: str) -> Optional[CartRecord]:
        return self._records.get(session_key)

    async def put(self, session_key: str, record: CartRecord) -> None:
        self._records[session_key] = record

    def __len__(self) -> int:
        return len(self._records)


class RedisSessionStore:
    """Upstash Redis store, shared across instances. Records are JSON, no TTL."""

    def __init__(self, redis=None):
        self._redis = redis  # Lazy initialization

    @property
    def redis(self):
        if self._redis is None:
            self._redis = get_redis()
        return self._redis

    async def get(self, session_key: str) -> Optional[CartRecord]:
        key = RedisKeys.session_cart_key(session_key)
        data = await self.redis.get(key)
        if not data:
            return None
        try:
            return CartRecord.from_dict(json.loads(data))
        except (json.JSONDecodeError, KeyError, TypeError) as e:
            # Corrupted entry is treated as absent and will be overwritten
            logger.warning("Corrupted cart record for session %s: %s", sanitize_id_for_logging(session_key), e)
            return None

    async def put(self, session_key: str, record: CartRecord) -> None:
        key = RedisKeys.session_cart_key(session_key)
        await self.redis.set(key, json.dumps(record.to_dict()))


def create_session_store(backend: Optional[str] = None) -> SessionStore:
    """Build the store selected by SESSION_STORE (memory | redis)."""
    backend = (backend or os.environ.get("SESSION_STORE", "memory")).lower()
    if backend == "memory":
        return MemorySessionStore()
    if backend == "redis":
        return RedisSessionStore()
    raise ConfigurationError(f"Unknown SESSION_STORE backend: {backend}")
