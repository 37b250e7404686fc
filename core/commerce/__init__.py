"""Commerce package: Storefront GraphQL client, models, and errors."""
from .client import StorefrontClient, build_search_query
from .errors import StorefrontError
from .models import Money, Product, ProductVariant, RemoteCart

__all__ = [
    "StorefrontClient",
    "StorefrontError",
    "build_search_query",
    "Money",
    "Product",
    "ProductVariant",
    "RemoteCart",
]
