"""Pytest configuration and fixtures"""
import os
import pytest
from unittest.mock import Mock, AsyncMock

# Set test environment variables
os.environ.setdefault("SHOPIFY_STORE_DOMAIN", "test-shop.myshopify.com")
os.environ.setdefault("SHOPIFY_STOREFRONT_TOKEN", "test_storefront_token")
os.environ.setdefault("SESSION_STORE", "memory")

from core.cart import MemorySessionStore, SessionCartResolver
from core.commerce import Money, Product, ProductVariant, RemoteCart


CART_ID = "gid://shopify/Cart/c1-abc123"
CHECKOUT_URL = "https://test-shop.myshopify.com/cart/c/c1-abc123"


@pytest.fixture
def product_node():
    """Storefront Product node as returned by GraphQL"""
    return {
        "id": "gid://shopify/Product/1",
        "title": "Red Shirt",
        "handle": "red-shirt",
        "description": "A red shirt",
        "featuredImage": {"url": "https://cdn.shopify.com/featured.png"},
        "images": {"edges": [{"node": {"url": "https://cdn.shopify.com/red-shirt.png"}}]},
        "priceRange": {"minVariantPrice": {"amount": "19.99", "currencyCode": "USD"}},
        "variants": {
            "edges": [
                {"node": {
                    "id": f"gid://shopify/ProductVariant/{i}",
                    "title": f"Size {i}",
                    "price": {"amount": "19.99", "currencyCode": "USD"},
                }}
                for i in range(1, 4)
            ]
        },
    }


@pytest.fixture
def sample_product():
    """Normalized product"""
    return Product(
        id="gid://shopify/Product/1",
        title="Red Shirt",
        handle="red-shirt",
        description="A red shirt",
        price=Money(amount="19.99", currency_code="USD"),
        image="https://cdn.shopify.com/red-shirt.png",
        url="https://test-shop.myshopify.com/products/red-shirt",
        variants=[
            ProductVariant(
                id="gid://shopify/ProductVariant/1",
                title="M",
                price=Money(amount="19.99", currency_code="USD"),
            )
        ],
    )


@pytest.fixture
def mock_gateway(sample_product):
    """Mock StorefrontClient"""
    gateway = Mock()
    gateway.create_cart = AsyncMock(return_value=RemoteCart(id=CART_ID, checkout_url=CHECKOUT_URL, total_quantity=0))
    gateway.add_lines = AsyncMock(
        side_effect=lambda cart_id, lines: RemoteCart(
            id=cart_id,
            checkout_url=CHECKOUT_URL,
            total_quantity=sum(line["quantity"] for line in lines),
        )
    )
    gateway.search_products = AsyncMock(return_value=[sample_product])
    gateway.get_product_by_handle = AsyncMock(return_value=sample_product)
    return gateway


@pytest.fixture
def memory_store():
    """Empty in-memory session store"""
    return MemorySessionStore()


@pytest.fixture
def resolver(mock_gateway, memory_store):
    """Resolver wired to the mock gateway and an empty store"""
    return SessionCartResolver(gateway=mock_gateway, store=memory_store)
