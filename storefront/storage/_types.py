"""
Storage — typed key-value protocol.

All methods return Result; a storage failure is a value, never an exception.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from kungfu import Result

# ═══════════════════════════════════════════════════════════════════════════════
# Storage Error
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class StorageError:
    """Storage operation error."""

    message: str
    cause: Exception | None = None

    def __str__(self) -> str:
        return self.message


# ═══════════════════════════════════════════════════════════════════════════════
# Storage Protocol
# ═══════════════════════════════════════════════════════════════════════════════


class Storage(Protocol):
    """
    Durable local key-value storage.

    Synchronous: cart mutations persist inline, between the checkout's
    suspension points.

    Example — file-backed implementation:

        class FileStorage:
            def __init__(self, root: Path) -> None:
                self.root = root

            def get(self, key: str) -> Result[str | None, StorageError]:
                path = self.root / key
                try:
                    return Ok(path.read_text() if path.exists() else None)
                except OSError as e:
                    return Error(StorageError(f"Failed to read {key}", e))

            # ... set / delete
    """

    def get(self, key: str) -> Result[str | None, StorageError]:
        """Read value. Returns Ok(None) if absent."""
        ...

    def set(self, key: str, value: str) -> Result[None, StorageError]:
        """Write value, replacing any previous one."""
        ...

    def delete(self, key: str) -> Result[bool, StorageError]:
        """Delete value. Returns Ok(True) if it existed."""
        ...


__all__ = ("StorageError", "Storage")
