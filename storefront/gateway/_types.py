"""
Gateway types — create-order / verify contracts.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Protocol

from kungfu import Result

from storefront._types import Money

# ═══════════════════════════════════════════════════════════════════════════════
# Requests / Responses
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class CreateOrderRequest:
    amount: Money
    receipt: str
    customer_name: str | None = None
    customer_email: str | None = None
    customer_phone: str | None = None

    def to_wire(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "amount": float(self.amount),
            "receipt": self.receipt,
        }
        if self.customer_name is not None:
            payload["customerName"] = self.customer_name
        if self.customer_email is not None:
            payload["customerEmail"] = self.customer_email
        if self.customer_phone is not None:
            payload["customerPhone"] = self.customer_phone
        return payload


@dataclass(frozen=True, slots=True)
class OrderParams:
    """Gateway order handle; becomes the widget's parameters."""

    key: str
    amount: Decimal
    currency: str
    order_id: str


@dataclass(frozen=True, slots=True)
class VerifyResult:
    ok: bool


type PaymentPayload = Mapping[str, Any]
"""Opaque payment response from the widget, forwarded verbatim to verify."""

# ═══════════════════════════════════════════════════════════════════════════════
# Errors
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class GatewayError:
    """Transport failure, error body, or malformed response."""

    message: str
    cause: Exception | None = None

    def __str__(self) -> str:
        return self.message


# ═══════════════════════════════════════════════════════════════════════════════
# Client Protocol
# ═══════════════════════════════════════════════════════════════════════════════


class GatewayClient(Protocol):
    """
    Remote payment backend.

    Implementations handle their own network timeouts; the checkout flow
    never retries.
    """

    async def create_order(
        self, request: CreateOrderRequest
    ) -> Result[OrderParams, GatewayError]:
        ...

    async def verify(self, payload: PaymentPayload) -> Result[VerifyResult, GatewayError]:
        ...


__all__ = (
    "CreateOrderRequest",
    "OrderParams",
    "VerifyResult",
    "PaymentPayload",
    "GatewayError",
    "GatewayClient",
)
