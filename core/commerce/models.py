"""Storefront data shapes, normalized from GraphQL nodes."""
from dataclasses import dataclass, field
from typing import Optional, List

# Variant summaries returned per product
MAX_VARIANTS = 5


def _edges(connection: Optional[dict]) -> List[dict]:
    """Unwrap a GraphQL connection into its nodes."""
    if not connection:
        return []
    return [edge["node"] for edge in connection.get("edges", []) if edge.get("node")]


@dataclass
class Money:
    """Decimal string amount plus ISO currency code, as Shopify returns it."""
    amount: str
    currency_code: str

    @classmethod
    def from_node(cls, node: Optional[dict]) -> Optional["Money"]:
        if not node:
            return None
        return cls(amount=str(node.get("amount", "")), currency_code=node.get("currencyCode", ""))

    def to_dict(self) -> dict:
        return {"amount": self.amount, "currencyCode": self.currency_code}

    def __str__(self) -> str:
        return f"{self.amount} {self.currency_code}"


@dataclass
class ProductVariant:
    """Purchasable configuration of a product."""
    id: str
    title: str
    price: Optional[Money] = None

    @classmethod
    def from_node(cls, node: dict) -> "ProductVariant":
        return cls(
            id=node["id"],
            title=node.get("title", ""),
            price=Money.from_node(node.get("price")),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "price": self.price.to_dict() if self.price else None,
        }


@dataclass
class Product:
    """Product summary as served to the widget."""
    id: str
    title: str
    handle: str = ""
    description: str = ""
    price: Optional[Money] = None
    image: Optional[str] = None
    url: Optional[str] = None
    variants: List[ProductVariant] = field(default_factory=list)

    @classmethod
    def from_node(cls, node: dict, url: Optional[str] = None) -> "Product":
        """
        Build a product from a Storefront `Product` node.

        The image is the first entry of `images`, falling back to
        `featuredImage`. The price is the product's minimum variant price,
        falling back to the first variant's own price.
        """
        images = _edges(node.get("images"))
        image = images[0].get("url") if images else None
        if not image and node.get("featuredImage"):
            image = node["featuredImage"].get("url")

        variants = [ProductVariant.from_node(v) for v in _edges(node.get("variants"))][:MAX_VARIANTS]

        price = Money.from_node((node.get("priceRange") or {}).get("minVariantPrice"))
        if price is None and variants:
            price = variants[0].price

        return cls(
            id=node["id"],
            title=node.get("title", ""),
            handle=node.get("handle", ""),
            description=node.get("description") or "",
            price=price,
            image=image,
            url=url,
            variants=variants,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "handle": self.handle,
            "description": self.description,
            "url": self.url,
            "price": self.price.to_dict() if self.price else None,
            "image": self.image,
            "variants": [v.to_dict() for v in self.variants],
        }


@dataclass
class RemoteCart:
    """Cart as reported by the Storefront API after a cart mutation."""
    id: str
    checkout_url: str
    total_quantity: Optional[int] = None

    @classmethod
    def from_node(cls, node: dict) -> "RemoteCart":
        total = node.get("totalQuantity")
        return cls(
            id=node["id"],
            checkout_url=node.get("checkoutUrl", ""),
            total_quantity=int(total) if total is not None else None,
        )
