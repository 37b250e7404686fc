"""
Widget API Pydantic Models

Field names are camelCase to match the storefront widget's payloads.
"""
from typing import Any, Optional, Union

from pydantic import BaseModel


class SearchRequest(BaseModel):
    query: Optional[str] = None
    maxPrice: Optional[Union[int, float]] = None


class AddToCartRequest(BaseModel):
    variantId: Optional[str] = None
    # Anything goes; normalize_quantity decides
    quantity: Any = None


class ChatbotSearchRequest(BaseModel):
    message: str = ""
