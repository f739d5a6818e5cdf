"""
Test doubles for the gateway, the payment widget and storage.
"""

from __future__ import annotations

import asyncio
import json
from collections.abc import Callable
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

import httpx
from kungfu import Result, Ok, Error

from storefront.checkout import Contact
from storefront.gateway import (
    CreateOrderRequest,
    GatewayError,
    OrderParams,
    PaymentPayload,
    VerifyResult,
)
from storefront.storage import StorageError
from storefront.widget import OnComplete, OnDismiss, WidgetOptions

ORDER = OrderParams(
    key="rzp_test_key",
    amount=Decimal("15447"),
    currency="INR",
    order_id="order_1",
)

PAYMENT = {
    "razorpay_payment_id": "pay_1",
    "razorpay_order_id": "order_1",
    "razorpay_signature": "sig",
}

CONTACT = Contact(name="Ann Lee", email="ann@example.com", phone="555-0100")


# ═══════════════════════════════════════════════════════════════════════════════
# Gateway
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass
class FakeGateway:
    """Records calls and answers from the configured results, in order."""

    orders: list[Result[OrderParams, GatewayError]] = field(
        default_factory=lambda: [Ok(ORDER)]
    )
    verifications: list[Result[VerifyResult, GatewayError]] = field(
        default_factory=lambda: [Ok(VerifyResult(ok=True))]
    )
    order_requests: list[CreateOrderRequest] = field(default_factory=list)
    verify_payloads: list[PaymentPayload] = field(default_factory=list)

    async def create_order(
        self, request: CreateOrderRequest
    ) -> Result[OrderParams, GatewayError]:
        self.order_requests.append(request)
        return self.orders[min(len(self.order_requests), len(self.orders)) - 1]

    async def verify(self, payload: PaymentPayload) -> Result[VerifyResult, GatewayError]:
        self.verify_payloads.append(payload)
        return self.verifications[min(len(self.verify_payloads), len(self.verifications)) - 1]


# ═══════════════════════════════════════════════════════════════════════════════
# Widget
# ═══════════════════════════════════════════════════════════════════════════════


class ScriptedWidget:
    """Calls back as soon as it is opened, unless its action is "hold"."""

    def __init__(
        self,
        options: WidgetOptions,
        on_complete: OnComplete,
        on_dismiss: OnDismiss,
        action: str,
        payload: PaymentPayload,
    ) -> None:
        self.options = options
        self._on_complete = on_complete
        self._on_dismiss = on_dismiss
        self._action = action
        self._payload = payload

    def open(self) -> None:
        match self._action:
            case "complete":
                self._on_complete(self._payload)
            case "dismiss":
                self._on_dismiss()
            case "raise":
                raise RuntimeError("widget crashed")
            case _:
                pass  # held: the test drives the callbacks


@dataclass
class WidgetHost:
    """Widget factory that remembers every widget it built."""

    action: str = "complete"
    payload: PaymentPayload = field(default_factory=lambda: dict(PAYMENT))
    opened: list[ScriptedWidget] = field(default_factory=list)

    def __call__(
        self, options: WidgetOptions, on_complete: OnComplete, on_dismiss: OnDismiss
    ) -> ScriptedWidget:
        widget = ScriptedWidget(options, on_complete, on_dismiss, self.action, self.payload)
        self.opened.append(widget)
        return widget

    def complete(self, payload: PaymentPayload | None = None) -> None:
        self.opened[-1]._on_complete(payload if payload is not None else self.payload)

    def dismiss(self) -> None:
        self.opened[-1]._on_dismiss()


# ═══════════════════════════════════════════════════════════════════════════════
# Storage
# ═══════════════════════════════════════════════════════════════════════════════


class FailingStorage:
    """Every read and write fails."""

    def __init__(self) -> None:
        self.writes = 0

    def get(self, key: str) -> Result[str | None, StorageError]:
        return Error(StorageError(f"Failed to get {key}: disk unavailable"))

    def set(self, key: str, value: str) -> Result[None, StorageError]:
        self.writes += 1
        return Error(StorageError(f"Failed to set {key}: disk full"))

    def delete(self, key: str) -> Result[bool, StorageError]:
        return Error(StorageError(f"Failed to delete {key}: disk unavailable"))


# ═══════════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════════


async def until(predicate: Callable[[], bool], *, ticks: int = 100) -> None:
    """Yield to the loop until predicate holds."""
    for _ in range(ticks):
        if predicate():
            return
        await asyncio.sleep(0)
    raise AssertionError("condition not reached")


def json_body(request: httpx.Request) -> Any:
    return json.loads(request.content)
