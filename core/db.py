"""
Database Module - Upstash Redis client

Provides a singleton async Upstash Redis client used as the optional
shared backend for session carts (SESSION_STORE=redis).
"""

import os
from typing import Optional

from upstash_redis.asyncio import Redis as AsyncRedis

from core.errors import ConfigurationError, ERROR_REDIS_NOT_CONFIGURED


# Upstash Redis - standard env var names per docs
UPSTASH_REDIS_REST_URL = os.environ.get("UPSTASH_REDIS_REST_URL", "")
UPSTASH_REDIS_REST_TOKEN = os.environ.get("UPSTASH_REDIS_REST_TOKEN", "")


_redis_client: Optional[AsyncRedis] = None


def get_redis() -> AsyncRedis:
    """
    Get async Upstash Redis client (singleton).

    Uses standard Upstash env var names:
    - UPSTASH_REDIS_REST_URL
    - UPSTASH_REDIS_REST_TOKEN
    """
    global _redis_client

    if _redis_client is None:
        if not UPSTASH_REDIS_REST_URL or not UPSTASH_REDIS_REST_TOKEN:
            raise ConfigurationError(ERROR_REDIS_NOT_CONFIGURED)
        _redis_client = AsyncRedis(url=UPSTASH_REDIS_REST_URL, token=UPSTASH_REDIS_REST_TOKEN)

    return _redis_client


class RedisKeys:
    """Redis key prefixes for different data types."""

    SESSION_CART = "session_cart:"  # session_cart:{session_key}

    @staticmethod
    def session_cart_key(session_key: str) -> str:
        return f"{RedisKeys.SESSION_CART}{session_key}"
