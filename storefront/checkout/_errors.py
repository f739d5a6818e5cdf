"""
Checkout errors — values returned in Error(...), never raised.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class EmptyCartError:
    code: str = "empty_cart"
    message: str = "Cart is empty"


@dataclass(frozen=True, slots=True)
class ValidationError:
    missing: tuple[str, ...]
    code: str = "validation_failed"

    @property
    def message(self) -> str:
        return f"Please fill {', '.join(self.missing)}"


@dataclass(frozen=True, slots=True)
class OrderCreationError:
    message: str
    code: str = "order_creation_failed"


@dataclass(frozen=True, slots=True)
class WidgetUnavailableError:
    message: str
    code: str = "widget_unavailable"


@dataclass(frozen=True, slots=True)
class VerificationError:
    message: str = "Payment could not be confirmed"
    code: str = "verification_failed"


@dataclass(frozen=True, slots=True)
class CheckoutInProgressError:
    code: str = "checkout_in_progress"
    message: str = "A checkout is already in progress"


@dataclass(frozen=True, slots=True)
class InvalidTransitionError:
    command: str
    state: str
    code: str = "invalid_transition"

    @property
    def message(self) -> str:
        return f"Cannot {self.command} while {self.state}"


type CheckoutError = (
    EmptyCartError
    | ValidationError
    | OrderCreationError
    | WidgetUnavailableError
    | VerificationError
    | CheckoutInProgressError
    | InvalidTransitionError
)


__all__ = (
    "EmptyCartError",
    "ValidationError",
    "OrderCreationError",
    "WidgetUnavailableError",
    "VerificationError",
    "CheckoutInProgressError",
    "InvalidTransitionError",
    "CheckoutError",
)
