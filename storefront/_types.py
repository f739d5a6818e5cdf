"""
Core types for storefront.

Re-exports from kungfu + domain type aliases.
"""

from __future__ import annotations

from decimal import Decimal

# Re-export from kungfu
from kungfu import Result, Ok, Error, LazyCoroResult


# ═══════════════════════════════════════════════════════════════════════════════
# Domain Aliases
# ═══════════════════════════════════════════════════════════════════════════════

type ProductId = str
"""Catalog identifier; also the cart key."""

type Money = Decimal
"""Currency-agnostic amount in major units."""

type Fallible[T, E] = LazyCoroResult[T, E]
"""Lazy async computation that can fail with E."""

# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    # Re-exports from kungfu
    "Result",
    "Ok",
    "Error",
    "LazyCoroResult",
    # Aliases
    "ProductId",
    "Money",
    "Fallible",
)
