"""Session cart models."""
from dataclasses import dataclass
from typing import Any, Optional

from core.commerce.models import RemoteCart

DEFAULT_QUANTITY = 1


def normalize_quantity(value: Any) -> int:
    """
    Coerce a requested quantity to a positive int.

    Absent, non-numeric, boolean, zero and negative values all become 1.
    Numeric strings and floats are truncated toward zero first, so
    "3" -> 3 and 2.7 -> 2.
    """
    if value is None or isinstance(value, bool):
        return DEFAULT_QUANTITY
    try:
        quantity = int(float(value))
    except (TypeError, ValueError, OverflowError):
        return DEFAULT_QUANTITY
    return quantity if quantity > 0 else DEFAULT_QUANTITY


@dataclass
class CartRecord:
    """Remote cart reference held for a session."""
    cart_id: str
    checkout_url: str
    total_quantity: Optional[int] = None

    @classmethod
    def from_remote(cls, cart: RemoteCart) -> "CartRecord":
        return cls(
            cart_id=cart.id,
            checkout_url=cart.checkout_url,
            total_quantity=cart.total_quantity,
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for storage and responses."""
        return {
            "cartId": self.cart_id,
            "checkoutUrl": self.checkout_url,
            "totalQuantity": self.total_quantity,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CartRecord":
        total = data.get("totalQuantity")
        return cls(
            cart_id=data["cartId"],
            checkout_url=data.get("checkoutUrl", ""),
            total_quantity=int(total) if total is not None else None,
        )


@dataclass
class LineItemRequest:
    """Single line to add to a cart; never stored."""
    variant_id: str
    quantity: int = DEFAULT_QUANTITY

    def to_line_input(self) -> dict:
        """Shape expected by `CartLineInput`."""
        return {"merchandiseId": self.variant_id, "quantity": self.quantity}
