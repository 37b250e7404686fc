"""
Widget API Router

Endpoints called by the storefront widget. Successful responses are
wrapped as {"result": ...}; failures are turned into
{"error": true, "message": ...} by the app-level exception handlers.
"""
from typing import Optional

from fastapi import APIRouter, Depends

from core.cart import SessionCartResolver
from core.commerce import StorefrontClient
from core.logging import get_logger, sanitize_id_for_logging
from core.session import SessionIdentity, session_from_request
from .deps import get_cart_resolver, get_storefront_client
from .models import AddToCartRequest, SearchRequest

logger = get_logger(__name__)

router = APIRouter(tags=["widget"])


@router.post("/search")
async def search_products(
    body: Optional[SearchRequest] = None,
    client: StorefrontClient = Depends(get_storefront_client),
):
    """Free-text product search with an optional exclusive max price"""
    body = body or SearchRequest()
    products = await client.search_products(body.query, body.maxPrice)
    return {"result": {"items": [p.to_dict() for p in products]}}


@router.post("/add-to-cart")
async def add_to_cart(
    body: AddToCartRequest,
    session: SessionIdentity = Depends(session_from_request),
    resolver: SessionCartResolver = Depends(get_cart_resolver),
):
    """Add a variant to the caller's session cart, creating the cart if needed"""
    if session.is_derived:
        logger.debug("add-to-cart using derived session %s", sanitize_id_for_logging(session.key))

    record = await resolver.add_to_cart(session.key, body.variantId, body.quantity)
    return {
        "result": {
            "cartId": record.cart_id,
            "checkoutUrl": record.checkout_url,
            "totalQuantity": record.total_quantity,
        }
    }


@router.post("/create-checkout")
async def create_checkout(
    session: SessionIdentity = Depends(session_from_request),
    resolver: SessionCartResolver = Depends(get_cart_resolver),
):
    """Return the checkout URL of the caller's session cart"""
    record = await resolver.resolve(session.key)
    return {"result": {"checkoutUrl": record.checkout_url, "cartId": record.cart_id}}


@router.get("/product/{handle}")
async def get_product(
    handle: str,
    client: StorefrontClient = Depends(get_storefront_client),
):
    """Product details by URL handle"""
    product = await client.get_product_by_handle(handle)
    return {"result": product.to_dict()}
