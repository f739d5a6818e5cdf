from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal

import httpx
import pytest
from kungfu import Ok, Error

from storefront.gateway import (
    CreateOrderRequest,
    GatewayError,
    HttpGatewayClient,
    OrderParams,
    VerifyResult,
    api_url,
    parse_order,
    parse_verify,
)

from fakes import PAYMENT, json_body

BASE = "https://shop.test"

type Handler = Callable[[httpx.Request], httpx.Response]


def client_for(handler: Handler) -> HttpGatewayClient:
    return HttpGatewayClient(
        BASE, client=httpx.AsyncClient(transport=httpx.MockTransport(handler))
    )


# ═══════════════════════════════════════════════════════════════════════════════
# URLs and wire format
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize(
    ("base", "path", "expected"),
    [
        ("", "/api/razorpay/verify", "/api/razorpay/verify"),
        ("https://shop.test", "/api/x", "https://shop.test/api/x"),
        ("https://shop.test/", "/api/x", "https://shop.test/api/x"),
        ("https://shop.test//", "api/x", "https://shop.test/api/x"),
    ],
)
def test_api_url(base: str, path: str, expected: str) -> None:
    assert api_url(base, path) == expected


def test_create_order_wire_format() -> None:
    request = CreateOrderRequest(
        amount=Decimal("154.47"),
        receipt="rcpt_1",
        customer_name="Ann",
        customer_email="ann@example.com",
        customer_phone="555",
    )

    assert request.to_wire() == {
        "amount": 154.47,
        "receipt": "rcpt_1",
        "customerName": "Ann",
        "customerEmail": "ann@example.com",
        "customerPhone": "555",
    }


def test_create_order_wire_format_without_contact() -> None:
    assert CreateOrderRequest(Decimal("10"), "rcpt_2").to_wire() == {
        "amount": 10.0,
        "receipt": "rcpt_2",
    }


# ═══════════════════════════════════════════════════════════════════════════════
# Parsing
# ═══════════════════════════════════════════════════════════════════════════════


def test_parse_order() -> None:
    data = {"key": "rzp_k", "amount": 15447, "currency": "INR", "orderId": "order_9"}

    assert parse_order(data) == Ok(
        OrderParams(key="rzp_k", amount=Decimal("15447"), currency="INR", order_id="order_9")
    )


@pytest.mark.parametrize(
    ("data", "fragment"),
    [
        ({"error": "x"}, "x"),
        ({"key": "k", "amount": 1, "currency": "INR"}, "orderId"),
        ({"key": "k", "amount": "lots", "currency": "INR", "orderId": "o"}, "bad amount"),
        (["not", "an", "object"], "not an object"),
    ],
)
def test_parse_order_rejects(data: object, fragment: str) -> None:
    match parse_order(data):
        case Error(GatewayError(message=message)):
            assert fragment in message
        case other:
            pytest.fail(f"expected an error, got {other!r}")


@pytest.mark.parametrize(
    ("data", "ok"),
    [
        ({"ok": True}, True),
        ({"ok": False}, False),
        ({"ok": "true"}, False),
        ({"ok": 1}, False),
        ({}, False),
    ],
)
def test_parse_verify_only_true_counts(data: dict, ok: bool) -> None:
    assert parse_verify(data) == Ok(VerifyResult(ok=ok))


# ═══════════════════════════════════════════════════════════════════════════════
# HTTP client
# ═══════════════════════════════════════════════════════════════════════════════


async def test_create_order_posts_json() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json={"key": "rzp_k", "amount": 15447, "currency": "INR", "orderId": "order_1"},
        )

    gateway = client_for(handler)
    result = await gateway.create_order(CreateOrderRequest(Decimal("154.47"), "rcpt_1"))

    assert result == Ok(OrderParams("rzp_k", Decimal("15447"), "INR", "order_1"))
    assert seen[0].method == "POST"
    assert str(seen[0].url) == "https://shop.test/api/razorpay/create-order"
    assert json_body(seen[0]) == {"amount": 154.47, "receipt": "rcpt_1"}


async def test_create_order_error_body() -> None:
    gateway = client_for(lambda request: httpx.Response(500, json={"error": "x"}))

    match await gateway.create_order(CreateOrderRequest(Decimal("1"), "rcpt_1")):
        case Error(e):
            assert e.message == "create-order: x"
        case other:
            pytest.fail(f"expected an error, got {other!r}")


async def test_create_order_transport_failure() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    gateway = client_for(handler)

    match await gateway.create_order(CreateOrderRequest(Decimal("1"), "rcpt_1")):
        case Error(GatewayError(cause=cause)):
            assert isinstance(cause, httpx.ConnectError)
        case other:
            pytest.fail(f"expected an error, got {other!r}")


async def test_verify_forwards_payload_verbatim() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"ok": True})

    gateway = client_for(handler)

    assert await gateway.verify(PAYMENT) == Ok(VerifyResult(ok=True))
    assert str(seen[0].url) == "https://shop.test/api/razorpay/verify"
    assert json_body(seen[0]) == PAYMENT


async def test_verify_not_ok() -> None:
    gateway = client_for(lambda request: httpx.Response(400, json={"ok": False}))

    assert await gateway.verify(PAYMENT) == Ok(VerifyResult(ok=False))


async def test_verify_malformed_body() -> None:
    gateway = client_for(lambda request: httpx.Response(200, text="<html>oops</html>"))

    result = await gateway.verify(PAYMENT)

    assert not result
    assert "POST https://shop.test/api/razorpay/verify" in result.unwrap_err().message


async def test_custom_paths() -> None:
    urls: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        urls.append(str(request.url))
        return httpx.Response(200, json={"ok": True})

    gateway = HttpGatewayClient(
        "https://pay.test/",
        verify_path="v2/verify",
        client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )
    await gateway.verify({})

    assert urls == ["https://pay.test/v2/verify"]


async def test_aclose_leaves_injected_client_open() -> None:
    client = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(200)))
    gateway = HttpGatewayClient(BASE, client=client)

    await gateway.aclose()

    assert not client.is_closed
    await client.aclose()


async def test_aclose_closes_owned_client() -> None:
    gateway = HttpGatewayClient(BASE)

    await gateway.aclose()

    assert gateway._client.is_closed
