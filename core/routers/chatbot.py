"""
Chatbot Router

Product search for the storefront chat assistant. Replies are either a
list of product cards or a plain "nothing found" sentence the bot can
show verbatim.
"""
from fastapi import APIRouter, Depends

from core.commerce import Product, StorefrontClient
from .deps import get_storefront_client
from .models import ChatbotSearchRequest

router = APIRouter(prefix="/chatbot", tags=["chatbot"])


def _product_card(product: Product) -> dict:
    return {
        "title": product.title,
        "url": product.url,
        "image": product.image,
        "price": str(product.price) if product.price else None,
    }


@router.post("/search")
async def chatbot_search(
    body: ChatbotSearchRequest,
    client: StorefrontClient = Depends(get_storefront_client),
):
    """Search products from a chat message"""
    products = await client.search_products(body.message)

    if not products:
        return {"reply": f'No products found for "{body.message}".'}

    return {"reply": [_product_card(p) for p in products]}
