"""
Checkout — contact → order → widget → verify, one flow at a time.

    from storefront import checkout as Co

    coordinator = Co.CheckoutCoordinator(cart, catalog, gateway, widget)
    coordinator.begin()
    result = await coordinator.submit_contact(Co.Contact(name, email, phone))
"""

from __future__ import annotations

from storefront.checkout._types import (
    Contact,
    FailureReason,
    Idle,
    CollectingContact,
    CreatingOrder,
    AwaitingPayment,
    Verifying,
    Succeeded,
    Failed,
    CheckoutState,
    Paid,
    Cancelled,
    CheckoutOutcome,
)
from storefront.checkout._errors import (
    EmptyCartError,
    ValidationError,
    OrderCreationError,
    WidgetUnavailableError,
    VerificationError,
    CheckoutInProgressError,
    InvalidTransitionError,
    CheckoutError,
)
from storefront.checkout._contact import validate_contact, new_receipt
from storefront.checkout._coordinator import CheckoutCoordinator

__all__ = (
    # Types
    "Contact",
    "FailureReason",
    "Idle",
    "CollectingContact",
    "CreatingOrder",
    "AwaitingPayment",
    "Verifying",
    "Succeeded",
    "Failed",
    "CheckoutState",
    "Paid",
    "Cancelled",
    "CheckoutOutcome",
    # Errors
    "EmptyCartError",
    "ValidationError",
    "OrderCreationError",
    "WidgetUnavailableError",
    "VerificationError",
    "CheckoutInProgressError",
    "InvalidTransitionError",
    "CheckoutError",
    # Operations
    "validate_contact",
    "new_receipt",
    "CheckoutCoordinator",
)
