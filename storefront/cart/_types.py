"""
Cart types.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.catalog import Product


@dataclass(frozen=True, slots=True)
class LineItem:
    """A cart entry joined with its product at read time. Never stored."""

    product: Product
    quantity: int


__all__ = ("LineItem",)
