"""
HTTP gateway client over httpx.

Note: Uses combinators to lift raising I/O into Result pipelines.
"""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from typing import Any

import httpx
from combinators import flow, lift as L
from kungfu import Result, Ok, Error

from storefront._types import Fallible
from storefront.gateway._types import (
    CreateOrderRequest,
    OrderParams,
    VerifyResult,
    PaymentPayload,
    GatewayError,
)

logger = logging.getLogger(__name__)


def api_url(base_url: str, path: str) -> str:
    """Join base URL and path; an empty base gives a relative path."""
    p = path if path.startswith("/") else f"/{path}"
    return f"{base_url.rstrip('/')}{p}"


# ═══════════════════════════════════════════════════════════════════════════════
# Response Parsing
# ═══════════════════════════════════════════════════════════════════════════════


def parse_order(data: Any) -> Result[OrderParams, GatewayError]:
    if not isinstance(data, dict):
        return Error(GatewayError("create-order: response is not an object"))
    if data.get("error"):
        return Error(GatewayError(f"create-order: {data['error']}"))

    missing = [f for f in ("key", "amount", "currency", "orderId") if data.get(f) is None]
    if missing:
        return Error(GatewayError(f"create-order: missing {', '.join(missing)}"))

    try:
        amount = Decimal(str(data["amount"]))
    except InvalidOperation as e:
        return Error(GatewayError(f"create-order: bad amount {data['amount']!r}", e))

    return Ok(OrderParams(
        key=str(data["key"]),
        amount=amount,
        currency=str(data["currency"]),
        order_id=str(data["orderId"]),
    ))


def parse_verify(data: Any) -> Result[VerifyResult, GatewayError]:
    if not isinstance(data, dict):
        return Error(GatewayError("verify: response is not an object"))
    return Ok(VerifyResult(ok=data.get("ok") is True))


# ═══════════════════════════════════════════════════════════════════════════════
# Client
# ═══════════════════════════════════════════════════════════════════════════════


class HttpGatewayClient:
    """
    Gateway client posting JSON to the create-order and verify endpoints.

    Example:
        gateway = HttpGatewayClient("https://api.example.com")

        match await gateway.create_order(request):
            case Ok(order):
                ...
            case Error(e):
                print(f"Payment failed: {e}")
    """

    def __init__(
        self,
        base_url: str = "",
        *,
        create_order_path: str = "/api/razorpay/create-order",
        verify_path: str = "/api/razorpay/verify",
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._create_order_url = api_url(base_url, create_order_path)
        self._verify_url = api_url(base_url, verify_path)
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def create_order(
        self, request: CreateOrderRequest
    ) -> Result[OrderParams, GatewayError]:
        return await (
            flow(self._post(self._create_order_url, request.to_wire()))
            .then(lambda data: L.from_result(parse_order(data)))
            .tap_err(lambda e: logger.warning("Order creation failed: %s", e))
            .compile()
        )

    async def verify(self, payload: PaymentPayload) -> Result[VerifyResult, GatewayError]:
        return await (
            flow(self._post(self._verify_url, dict(payload)))
            .then(lambda data: L.from_result(parse_verify(data)))
            .tap_err(lambda e: logger.warning("Verification request failed: %s", e))
            .compile()
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    def _post(self, url: str, body: dict[str, Any]) -> Fallible[Any, GatewayError]:
        async def send() -> Any:
            response = await self._client.post(url, json=body)
            return response.json()

        return L.catching_async(
            send,
            on_error=lambda e: GatewayError(f"POST {url}: {e}", e),
        )


__all__ = ("HttpGatewayClient", "api_url", "parse_order", "parse_verify")
