"""
Cart — product quantities with durable persistence.

    from storefront import cart as C

    store = C.CartStore.load(storage)
    store.add_item("p1")
    items = store.materialize(catalog)
"""

from __future__ import annotations

from storefront.cart._types import LineItem
from storefront.cart._codec import encode, decode
from storefront.cart._store import CartStore, DEFAULT_KEY

__all__ = (
    "LineItem",
    "encode",
    "decode",
    "CartStore",
    "DEFAULT_KEY",
)
