"""
Gateway — remote payment backend (create-order, verify).

    from storefront import gateway as G

    client = G.HttpGatewayClient("https://api.example.com")
    result = await client.create_order(G.CreateOrderRequest(amount, receipt))
"""

from __future__ import annotations

from storefront.gateway._types import (
    CreateOrderRequest,
    OrderParams,
    VerifyResult,
    PaymentPayload,
    GatewayError,
    GatewayClient,
)
from storefront.gateway._http import HttpGatewayClient, api_url, parse_order, parse_verify

__all__ = (
    "CreateOrderRequest",
    "OrderParams",
    "VerifyResult",
    "PaymentPayload",
    "GatewayError",
    "GatewayClient",
    "HttpGatewayClient",
    "api_url",
    "parse_order",
    "parse_verify",
)
