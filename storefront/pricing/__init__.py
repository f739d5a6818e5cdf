"""
Pricing — subtotal, shipping, tax, total.

    from storefront import pricing as P

    totals = P.price(cart.materialize(catalog))
"""

from __future__ import annotations

from storefront.pricing._types import PricingRules, PriceBreakdown, DEFAULT_RULES
from storefront.pricing._engine import price, line_total, shipping_for, to_cents

__all__ = (
    "PricingRules",
    "PriceBreakdown",
    "DEFAULT_RULES",
    "price",
    "line_total",
    "shipping_for",
    "to_cents",
)
