"""
Storefront Relay Core Module

This package contains the relay's building blocks:
- commerce: Shopify Storefront GraphQL gateway
- cart: session store and session cart resolver
- session: session identity resolution
- db: Upstash Redis client
- routers: FastAPI endpoints for the storefront widget

Note: Imports are lazy so that importing `core` does not pull in
httpx or Redis clients before they are needed.
"""

__all__ = [
    "get_redis",
    "StorefrontClient",
    "SessionCartResolver",
]


def __getattr__(name):
    """Lazy attribute access."""
    if name == "get_redis":
        from core.db import get_redis
        return get_redis
    elif name == "StorefrontClient":
        from core.commerce import StorefrontClient
        return StorefrontClient
    elif name == "SessionCartResolver":
        from core.cart import SessionCartResolver
        return SessionCartResolver
    raise AttributeError(f"module 'core' has no attribute '{name}'")
