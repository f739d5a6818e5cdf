"""
Catalog — read-only product source.

    from storefront import catalog as K

    products = K.sample_catalog()
    bag = products.get("p1")
"""

from __future__ import annotations

from storefront.catalog._types import Product, CatalogProvider, in_stock
from storefront.catalog._static import StaticCatalog, SAMPLE_PRODUCTS, sample_catalog

__all__ = (
    "Product",
    "CatalogProvider",
    "in_stock",
    "StaticCatalog",
    "SAMPLE_PRODUCTS",
    "sample_catalog",
)
