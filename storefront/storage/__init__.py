"""
Storage — durable local key-value persistence.

    from storefront import storage as St

    store, engine = St.create_storage("sqlite:///storefront.db").unwrap()
    store.set("cart_v1", "{}")
"""

from __future__ import annotations

from storefront.storage._types import Storage, StorageError
from storefront.storage._memory import MemoryStorage
from storefront.storage._sqlalchemy import StoredValue, SQLAlchemyStorage, create_storage

__all__ = (
    "Storage",
    "StorageError",
    "MemoryStorage",
    "StoredValue",
    "SQLAlchemyStorage",
    "create_storage",
)
