"""
Cart store — productId → quantity, persisted after every mutation.
"""

from __future__ import annotations

import logging

from kungfu import Ok, Error

from storefront._types import ProductId
from storefront.catalog import CatalogProvider
from storefront.storage import Storage, StorageError
from storefront.cart._codec import encode, decode
from storefront.cart._types import LineItem

logger = logging.getLogger(__name__)

DEFAULT_KEY = "cart_v1"


class CartStore:
    """
    Owns the cart mapping.

    Invariant: every stored quantity is >= 1. Persistence is best-effort:
    a failed write is logged and kept in `last_storage_error`, the in-memory
    mapping stays authoritative for the session.

    Example:
        cart = CartStore.load(storage)
        cart.add_item("p1")
        cart.set_quantity("p1", 3)
        items = cart.materialize(catalog)
    """

    def __init__(self, storage: Storage, key: str = DEFAULT_KEY) -> None:
        self._storage = storage
        self._key = key
        self._entries: dict[ProductId, int] = {}
        self.last_storage_error: StorageError | None = None

    @classmethod
    def load(cls, storage: Storage, key: str = DEFAULT_KEY) -> CartStore:
        """Rehydrate from storage; missing or malformed content gives an empty cart."""
        store = cls(storage, key)
        store.reload()
        return store

    # ═══════════════════════════════════════════════════════════════════════════
    # Mutations
    # ═══════════════════════════════════════════════════════════════════════════

    def add_item(self, product_id: ProductId) -> None:
        """Increment by one. Inventory is not consulted."""
        self._entries[product_id] = self._entries.get(product_id, 0) + 1
        self._persist()

    def set_quantity(self, product_id: ProductId, qty: int) -> None:
        """Set quantity; qty <= 0 removes the entry. A non-int qty raises TypeError."""
        if isinstance(qty, bool) or not isinstance(qty, int):
            raise TypeError(f"Quantity for {product_id} must be an int, got {qty!r}")
        if qty <= 0:
            self._entries.pop(product_id, None)
        else:
            self._entries[product_id] = qty
        self._persist()

    def clear(self) -> None:
        self._entries.clear()
        self._persist()

    # ═══════════════════════════════════════════════════════════════════════════
    # Reads
    # ═══════════════════════════════════════════════════════════════════════════

    def materialize(self, catalog: CatalogProvider) -> list[LineItem]:
        """Join entries with the catalog, silently skipping unknown products."""
        items: list[LineItem] = []
        for product_id, qty in self._entries.items():
            product = catalog.get(product_id)
            if product is None:
                continue
            items.append(LineItem(product=product, quantity=qty))
        return items

    def quantity(self, product_id: ProductId) -> int:
        return self._entries.get(product_id, 0)

    def entries(self) -> dict[ProductId, int]:
        return dict(self._entries)

    @property
    def is_empty(self) -> bool:
        return not self._entries

    def __len__(self) -> int:
        return len(self._entries)

    # ═══════════════════════════════════════════════════════════════════════════
    # Persistence
    # ═══════════════════════════════════════════════════════════════════════════

    def reload(self) -> None:
        """Replace in-memory state with what storage holds now."""
        match self._storage.get(self._key):
            case Ok(raw):
                self._entries = decode(raw)
            case Error(e):
                logger.warning("Cart read failed, starting empty: %s", e)
                self.last_storage_error = e
                self._entries = {}

    def _persist(self) -> None:
        match self._storage.set(self._key, encode(self._entries)):
            case Ok(_):
                self.last_storage_error = None
            case Error(e):
                logger.warning("Cart write failed, keeping in-memory state: %s", e)
                self.last_storage_error = e


__all__ = ("CartStore", "DEFAULT_KEY")
