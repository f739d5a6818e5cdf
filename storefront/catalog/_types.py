"""
Catalog types.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal
from typing import Protocol

from storefront._types import ProductId

# ═══════════════════════════════════════════════════════════════════════════════
# Product
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Product:
    """Read-only catalog record. Price is in major currency units."""

    id: ProductId
    title: str
    price: Decimal
    inventory: int
    image_alt: str = ""

    def __post_init__(self) -> None:
        if self.price < 0:
            raise ValueError(f"Product {self.id}: negative price {self.price}")
        if self.inventory < 0:
            raise ValueError(f"Product {self.id}: negative inventory {self.inventory}")


def in_stock(product: Product) -> bool:
    """Display helper: whether "add" should be offered. The cart never checks this."""
    return product.inventory > 0


# ═══════════════════════════════════════════════════════════════════════════════
# Provider Protocol
# ═══════════════════════════════════════════════════════════════════════════════


class CatalogProvider(Protocol):
    """
    Source of products.

    Static for the lifetime of a session; the cart joins against it at read
    time, so a product disappearing only hides the matching cart entry.
    """

    def list(self) -> Sequence[Product]:
        """All products, in display order."""
        ...

    def get(self, product_id: ProductId) -> Product | None:
        """Lookup by id. Returns None if unknown."""
        ...


__all__ = ("Product", "in_stock", "CatalogProvider")
