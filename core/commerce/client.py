"""Shopify Storefront API client.

One method per remote operation; every call is exactly one GraphQL POST.
No retries: a failure surfaces as StorefrontError and the caller decides.
"""

import json
import os
from typing import Any, Iterable, Optional, Union

import httpx

from core.errors import ConfigurationError, ERROR_PRODUCT_NOT_FOUND, ERROR_STOREFRONT_NOT_CONFIGURED
from core.logging import get_logger, sanitize_string_for_logging

from .errors import StorefrontError
from .models import Product, RemoteCart
from .queries import (
    CART_CREATE,
    CART_LINES_ADD,
    PRODUCT_BY_HANDLE,
    SEARCH_PAGE_SIZE,
    SEARCH_PRODUCTS,
)

logger = get_logger(__name__)

DEFAULT_API_VERSION = "2024-07"
ACCESS_TOKEN_HEADER = "X-Shopify-Storefront-Access-Token"

# Cap on response body echoed into transport error messages
_MAX_ERROR_BODY = 500


def _format_price(value: Union[int, float]) -> str:
    """Render a price bound without a trailing `.0` for whole numbers."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_search_query(text: Optional[str] = None, max_price: Optional[Union[int, float]] = None) -> str:
    """
    Build the Storefront free-text search string.

    >>> build_search_query("red shirt", 999)
    'red shirt price:<999'
    """
    tokens = []
    if text and text.strip():
        tokens.append(text.strip())
    if max_price is not None:
        tokens.append(f"price:<{_format_price(max_price)}")
    return " ".join(tokens)


class StorefrontClient:
    """Client for a single store's Storefront GraphQL endpoint."""

    def __init__(
        self,
        store_domain: Optional[str] = None,
        access_token: Optional[str] = None,
        api_version: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        env = os.environ
        self.store_domain = store_domain if store_domain is not None else env.get("SHOPIFY_STORE_DOMAIN", "")
        self.access_token = access_token if access_token is not None else env.get("SHOPIFY_STOREFRONT_TOKEN", "")
        self.api_version = api_version or env.get("SHOPIFY_API_VERSION", DEFAULT_API_VERSION)

        # HTTP client (lazy init unless injected)
        self._http_client = http_client

    @property
    def endpoint(self) -> str:
        return f"https://{self.store_domain}/api/{self.api_version}/graphql.json"

    def product_url(self, handle: str) -> str:
        """Public storefront page for a product handle."""
        return f"https://{self.store_domain}/products/{handle}"

    def _validate_config(self) -> None:
        if not self.store_domain or not self.access_token:
            raise ConfigurationError(ERROR_STOREFRONT_NOT_CONFIGURED)

    async def _get_http_client(self) -> httpx.AsyncClient:
        """Lazy creation of the shared httpx client."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                limits=httpx.Limits(max_connections=20, max_keepalive_connections=10),
            )
        return self._http_client

    async def aclose(self) -> None:
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    async def execute(self, query: str, variables: Optional[dict] = None) -> dict:
        """
        POST a GraphQL document and return its `data` object.

        Raises:
            StorefrontError: on network failure, non-2xx status, or a
                non-empty `errors` list.
        """
        self._validate_config()
        client = await self._get_http_client()

        try:
            response = await client.post(
                self.endpoint,
                headers={
                    "Content-Type": "application/json",
                    ACCESS_TOKEN_HEADER: self.access_token,
                },
                json={"query": query, "variables": variables or {}},
            )
        except httpx.HTTPError as e:
            logger.error("Storefront request failed: %s", e)
            raise StorefrontError(f"Storefront API request failed: {e}", kind="transport") from e

        if not response.is_success:
            body = response.text[:_MAX_ERROR_BODY]
            logger.warning("Storefront API HTTP %s: %s", response.status_code, sanitize_string_for_logging(body, 200))
            raise StorefrontError(
                f"Storefront API HTTP {response.status_code}: {body}",
                kind="transport",
                status_code=response.status_code,
                payload=body,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise StorefrontError(
                "Storefront API returned invalid JSON",
                kind="transport",
                status_code=response.status_code,
            ) from e

        errors = payload.get("errors")
        if errors:
            message = json.dumps(errors)
            logger.warning("Storefront GraphQL errors: %s", sanitize_string_for_logging(message, 200))
            raise StorefrontError(message, kind="graphql", status_code=response.status_code, payload=errors)

        data = payload.get("data")
        if data is None:
            raise StorefrontError("Storefront API returned no data", kind="graphql", status_code=response.status_code)
        return data

    @staticmethod
    def _mutation_cart(data: dict, field: str) -> RemoteCart:
        """Extract the cart from a cart mutation payload, raising on userErrors."""
        result = data.get(field) or {}
        user_errors = result.get("userErrors") or []
        if user_errors:
            message = "; ".join(e.get("message", "") for e in user_errors)
            raise StorefrontError(message, kind="user_error", payload=user_errors)

        cart = result.get("cart")
        if not cart:
            raise StorefrontError(f"{field} returned no cart", kind="graphql", payload=result)
        return RemoteCart.from_node(cart)

    # ==================== OPERATIONS ====================

    async def search_products(
        self,
        text: Optional[str] = None,
        max_price: Optional[Union[int, float]] = None,
    ) -> list[Product]:
        """Search products by free text and an exclusive max price."""
        query = build_search_query(text, max_price)
        data = await self.execute(SEARCH_PRODUCTS, {"query": query, "first": SEARCH_PAGE_SIZE})

        edges = ((data.get("products") or {}).get("edges")) or []
        products = []
        for edge in edges[:SEARCH_PAGE_SIZE]:
            node = edge.get("node")
            if node:
                products.append(Product.from_node(node, url=self.product_url(node.get("handle", ""))))

        logger.info("Search '%s' returned %d products", sanitize_string_for_logging(query), len(products))
        return products

    async def create_cart(self) -> RemoteCart:
        data = await self.execute(CART_CREATE)
        return self._mutation_cart(data, "cartCreate")

    async def add_lines(self, cart_id: str, lines: Iterable[dict[str, Any]]) -> RemoteCart:
        """Add `{merchandiseId, quantity}` lines to a cart."""
        data = await self.execute(CART_LINES_ADD, {"cartId": cart_id, "lines": list(lines)})
        return self._mutation_cart(data, "cartLinesAdd")

    async def get_product_by_handle(self, handle: str) -> Product:
        data = await self.execute(PRODUCT_BY_HANDLE, {"handle": handle})
        node = data.get("product")
        if not node:
            raise StorefrontError(f"{ERROR_PRODUCT_NOT_FOUND}: {handle}", kind="not_found")
        return Product.from_node(node, url=self.product_url(node.get("handle", handle)))
