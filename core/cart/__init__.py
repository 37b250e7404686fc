"""Cart package: session records, stores, and the session cart resolver."""
from .models import CartRecord, LineItemRequest, normalize_quantity
from .service import CartValidationError, SessionCartResolver
from .storage import MemorySessionStore, RedisSessionStore, SessionStore, create_session_store

__all__ = [
    "CartRecord",
    "LineItemRequest",
    "normalize_quantity",
    "CartValidationError",
    "SessionCartResolver",
    "SessionStore",
    "MemorySessionStore",
    "RedisSessionStore",
    "create_session_store",
]
