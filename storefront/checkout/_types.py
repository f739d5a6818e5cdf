"""
Checkout types — contact, states, outcomes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from storefront.gateway import OrderParams

# ═══════════════════════════════════════════════════════════════════════════════
# Contact
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Contact:
    name: str
    email: str
    phone: str


# ═══════════════════════════════════════════════════════════════════════════════
# States
# ═══════════════════════════════════════════════════════════════════════════════


class FailureReason(Enum):
    ORDER_CREATION_FAILED = "order_creation_failed"
    WIDGET_UNAVAILABLE = "widget_unavailable"
    VERIFICATION_FAILED = "verification_failed"


@dataclass(frozen=True, slots=True)
class Idle:
    pass


@dataclass(frozen=True, slots=True)
class CollectingContact:
    pass


@dataclass(frozen=True, slots=True)
class CreatingOrder:
    receipt: str


@dataclass(frozen=True, slots=True)
class AwaitingPayment:
    order: OrderParams


@dataclass(frozen=True, slots=True)
class Verifying:
    order: OrderParams


@dataclass(frozen=True, slots=True)
class Succeeded:
    order: OrderParams


@dataclass(frozen=True, slots=True)
class Failed:
    reason: FailureReason
    message: str


type CheckoutState = (
    Idle | CollectingContact | CreatingOrder | AwaitingPayment | Verifying | Succeeded | Failed
)

IN_FLIGHT = (CreatingOrder, AwaitingPayment, Verifying)
TERMINAL = (Succeeded, Failed)

# ═══════════════════════════════════════════════════════════════════════════════
# Outcomes of a submitted checkout
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Paid:
    """Payment verified; the cart has been cleared."""

    order: OrderParams


@dataclass(frozen=True, slots=True)
class Cancelled:
    """The widget was dismissed; nothing was charged and the flow is Idle."""


type CheckoutOutcome = Paid | Cancelled


__all__ = (
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
    "IN_FLIGHT",
    "TERMINAL",
    "Paid",
    "Cancelled",
    "CheckoutOutcome",
)
