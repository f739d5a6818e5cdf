"""
storefront — cart, pricing and hosted-widget checkout for a small shop.

    from storefront import cart as C      # Cart store
    from storefront import pricing as P   # Price breakdown
    from storefront import checkout as Co # Checkout state machine
    from storefront import gateway as G   # create-order / verify client
    from storefront import widget as W    # Payment widget bridge
"""

from storefront import catalog
from storefront import storage
from storefront import cart
from storefront import pricing
from storefront import gateway
from storefront import widget
from storefront import checkout
from storefront._types import (
    ProductId,
    Money,
    Fallible,
)
from storefront.config import Settings, load_settings
from storefront.session import Session

__version__ = "0.1.0"

__all__ = (
    "catalog",
    "storage",
    "cart",
    "pricing",
    "gateway",
    "widget",
    "checkout",
    "ProductId",
    "Money",
    "Fallible",
    "Settings",
    "load_settings",
    "Session",
)
