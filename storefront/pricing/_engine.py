"""
Pricing engine — pure function from line items to a price breakdown.
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal, ROUND_HALF_UP

from storefront._types import Money
from storefront.cart import LineItem
from storefront.pricing._types import PricingRules, PriceBreakdown, DEFAULT_RULES

CENT = Decimal("0.01")
ZERO = Decimal("0")


def to_cents(amount: Money) -> Money:
    """Round to 2 places, half up."""
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def line_total(item: LineItem) -> Money:
    return to_cents(item.product.price * item.quantity)


def shipping_for(subtotal: Money, rules: PricingRules = DEFAULT_RULES) -> Money:
    # Two separate guards: an empty cart and an above-threshold cart both ship free.
    if subtotal == 0:
        return ZERO
    if subtotal > rules.free_shipping_threshold:
        return ZERO
    return rules.flat_shipping


def price(items: Iterable[LineItem], rules: PricingRules = DEFAULT_RULES) -> PriceBreakdown:
    """
    Compute subtotal, shipping, tax and total.

    Subtotal is exact until output; tax applies to the subtotal only.

    Example:
        price([LineItem(bag, 1)])
        # PriceBreakdown(subtotal=129.00, shipping=9.99, tax=15.48, total=154.47)
    """
    subtotal = sum((item.product.price * item.quantity for item in items), ZERO)
    shipping = shipping_for(subtotal, rules)
    tax = to_cents(subtotal * rules.tax_rate)
    total = to_cents(subtotal + shipping + tax)
    return PriceBreakdown(
        subtotal=to_cents(subtotal),
        shipping=to_cents(shipping),
        tax=tax,
        total=total,
    )


__all__ = ("price", "line_total", "shipping_for", "to_cents")
