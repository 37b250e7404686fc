"""Session cart resolver: one remote cart per session key."""
import asyncio
import weakref
from typing import Any, Optional

from core.commerce import StorefrontClient
from core.errors import ERROR_VARIANT_REQUIRED
from core.logging import get_logger, sanitize_id_for_logging
from .models import CartRecord, LineItemRequest, normalize_quantity
from .storage import SessionStore, create_session_store

logger = get_logger(__name__)


class CartValidationError(ValueError):
    """Caller input rejected before any remote call."""


class SessionCartResolver:
    """
    Associates session keys with Storefront carts.

    Features:
    - Lazy cart creation on first use of a session key
    - Existing records are returned without any remote call
    - Cart creation is serialized per key within this process
    - Store is written only after a successful remote mutation
    """

    def __init__(self, gateway: StorefrontClient, store: Optional[SessionStore] = None):
        self.gateway = gateway
        self.store = store if store is not None else create_session_store()
        # Entries vanish once no request holds or waits on the lock
        self._creation_locks: "weakref.WeakValueDictionary[str, asyncio.Lock]" = weakref.WeakValueDictionary()

    def _lock_for(self, session_key: str) -> asyncio.Lock:
        lock = self._creation_locks.get(session_key)
        if lock is None:
            lock = self._creation_locks[session_key] = asyncio.Lock()
        return lock

    async def resolve(self, session_key: str) -> CartRecord:
        """Return the session's cart, creating a remote cart if none is stored."""
        record = await self.store.get(session_key)
        if record and record.cart_id:
            return record

        lock = self._lock_for(session_key)
        async with lock:
            # A concurrent request may have created it while we waited
            record = await self.store.get(session_key)
            if record and record.cart_id:
                return record

            remote = await self.gateway.create_cart()
            record = CartRecord.from_remote(remote)
            await self.store.put(session_key, record)

        logger.info(
            "Created cart %s for session %s",
            sanitize_id_for_logging(record.cart_id),
            sanitize_id_for_logging(session_key),
        )
        return record

    async def add_to_cart(self, session_key: str, variant_id: Optional[str], quantity: Any = None) -> CartRecord:
        """
        Add a variant to the session's cart.

        Raises:
            CartValidationError: variant_id missing or blank.
            StorefrontError: any remote failure; the store is left as it was.
        """
        if not variant_id or not isinstance(variant_id, str) or not variant_id.strip():
            raise CartValidationError(ERROR_VARIANT_REQUIRED)

        line = LineItemRequest(variant_id=variant_id.strip(), quantity=normalize_quantity(quantity))

        record = await self.resolve(session_key)
        remote = await self.gateway.add_lines(record.cart_id, [line.to_line_input()])

        # The mutation response is the source of truth for the cart reference
        updated = CartRecord.from_remote(remote)
        await self.store.put(session_key, updated)

        logger.info(
            "Added %d x %s to cart %s (total %s)",
            line.quantity,
            sanitize_id_for_logging(line.variant_id),
            sanitize_id_for_logging(updated.cart_id),
            updated.total_quantity,
        )
        return updated
