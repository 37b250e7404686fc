"""
Shared Dependencies for Routers

Lazy-loaded singletons so the httpx client and the session store are
created on first request, and are overridable in tests via
`app.dependency_overrides`.
"""

from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from core.commerce import StorefrontClient
    from core.cart import SessionCartResolver


# ==================== LAZY SINGLETONS ====================

_storefront_client: Optional["StorefrontClient"] = None
_cart_resolver: Optional["SessionCartResolver"] = None


def get_storefront_client() -> "StorefrontClient":
    """Get or create StorefrontClient singleton (lazy loaded)"""
    global _storefront_client
    if _storefront_client is None:
        from core.commerce import StorefrontClient
        _storefront_client = StorefrontClient()
    return _storefront_client


def get_cart_resolver() -> "SessionCartResolver":
    """Get or create SessionCartResolver singleton (lazy loaded)"""
    global _cart_resolver
    if _cart_resolver is None:
        from core.cart import SessionCartResolver
        _cart_resolver = SessionCartResolver(gateway=get_storefront_client())
    return _cart_resolver


# ==================== SHUTDOWN HELPERS ====================

async def shutdown_services():
    """Close the shared httpx client. Session records are kept."""
    global _storefront_client
    if _storefront_client is not None:
        await _storefront_client.aclose()
