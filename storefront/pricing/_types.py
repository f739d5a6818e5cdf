"""
Pricing types.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from storefront._types import Money


@dataclass(frozen=True, slots=True)
class PricingRules:
    """Flat-rate rules. Threshold is exclusive: free shipping needs subtotal > threshold."""

    free_shipping_threshold: Money = Decimal("150")
    flat_shipping: Money = Decimal("9.99")
    tax_rate: Decimal = Decimal("0.12")


DEFAULT_RULES = PricingRules()


@dataclass(frozen=True, slots=True)
class PriceBreakdown:
    subtotal: Money
    shipping: Money
    tax: Money
    total: Money

    @property
    def free_shipping(self) -> bool:
        return self.shipping == 0


__all__ = ("PricingRules", "DEFAULT_RULES", "PriceBreakdown")
