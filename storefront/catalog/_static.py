"""
Static in-process catalog.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from decimal import Decimal

from storefront._types import ProductId
from storefront.catalog._types import Product


class StaticCatalog:
    """Immutable, ordered product list with an id index."""

    def __init__(self, products: Iterable[Product]) -> None:
        items = tuple(products)
        index: dict[ProductId, Product] = {}
        for product in items:
            if product.id in index:
                raise ValueError(f"Duplicate product id: {product.id}")
            index[product.id] = product
        self._products = items
        self._index = index

    def list(self) -> Sequence[Product]:
        return self._products

    def get(self, product_id: ProductId) -> Product | None:
        return self._index.get(product_id)

    def __len__(self) -> int:
        return len(self._products)


# ═══════════════════════════════════════════════════════════════════════════════
# Sample Data
# ═══════════════════════════════════════════════════════════════════════════════

SAMPLE_PRODUCTS: tuple[Product, ...] = (
    Product("p1", "Classic Leather Bag", Decimal("129.00"), 6, "Leather bag"),
    Product("p2", "Minimalist Watch", Decimal("89.00"), 10, "Watch"),
    Product("p3", "Running Sneakers", Decimal("99.00"), 4, "Sneakers"),
    Product("p4", "Noise-Cancelling Headphones", Decimal("199.00"), 3, "Headphones"),
    Product("p5", "Organic Cotton T-Shirt", Decimal("25.00"), 24, "T-Shirt"),
    Product("p6", "Smartphone Stand", Decimal("19.00"), 50, "Phone stand"),
)


def sample_catalog() -> StaticCatalog:
    return StaticCatalog(SAMPLE_PRODUCTS)


__all__ = ("StaticCatalog", "SAMPLE_PRODUCTS", "sample_catalog")
