"""
In-memory storage.
"""

from __future__ import annotations

from kungfu import Result, Ok

from storefront.storage._types import StorageError


class MemoryStorage:
    """
    Dict-backed storage.

    Note: Only for tests and throwaway sessions; nothing survives the process.
    """

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Result[str | None, StorageError]:
        return Ok(self._data.get(key))

    def set(self, key: str, value: str) -> Result[None, StorageError]:
        self._data[key] = value
        return Ok(None)

    def delete(self, key: str) -> Result[bool, StorageError]:
        if key in self._data:
            del self._data[key]
            return Ok(True)
        return Ok(False)


__all__ = ("MemoryStorage",)
