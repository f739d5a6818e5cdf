"""
Settings — read once from the environment (and `.env`, if present).
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_CREATE_ORDER_PATH = "/api/razorpay/create-order"
DEFAULT_VERIFY_PATH = "/api/razorpay/verify"
DEFAULT_WIDGET_SCRIPT_URL = "https://checkout.razorpay.com/v1/checkout.js"
DEFAULT_STORAGE_URL = "sqlite:///storefront.db"
DEFAULT_CART_KEY = "cart_v1"


def _get_env(*keys: str, default: str | None = None) -> str | None:
    for k in keys:
        v = os.getenv(k)
        if v is not None and str(v).strip() != "":
            return v.strip()
    return default


def _get_float(*keys: str, default: float) -> float:
    v = _get_env(*keys, default=None)
    if v is None:
        return default
    return float(v)


@dataclass(frozen=True, slots=True)
class Settings:
    api_base_url: str = ""
    create_order_path: str = DEFAULT_CREATE_ORDER_PATH
    verify_path: str = DEFAULT_VERIFY_PATH
    widget_script_url: str = DEFAULT_WIDGET_SCRIPT_URL
    storage_url: str = DEFAULT_STORAGE_URL
    cart_key: str = DEFAULT_CART_KEY
    merchant_name: str = "YourBrand"
    order_description: str = "Order payment"
    http_timeout: float = 10.0


def load_settings(dotenv_path: str | None = None) -> Settings:
    """Build Settings from STOREFRONT_* variables; unset ones keep defaults."""
    load_dotenv(dotenv_path=dotenv_path)
    return Settings(
        api_base_url=_get_env("STOREFRONT_API_BASE_URL", default="") or "",
        create_order_path=_get_env(
            "STOREFRONT_CREATE_ORDER_PATH", default=DEFAULT_CREATE_ORDER_PATH
        ) or DEFAULT_CREATE_ORDER_PATH,
        verify_path=_get_env("STOREFRONT_VERIFY_PATH", default=DEFAULT_VERIFY_PATH)
        or DEFAULT_VERIFY_PATH,
        widget_script_url=_get_env(
            "STOREFRONT_WIDGET_SCRIPT_URL", default=DEFAULT_WIDGET_SCRIPT_URL
        ) or DEFAULT_WIDGET_SCRIPT_URL,
        storage_url=_get_env("STOREFRONT_STORAGE_URL", default=DEFAULT_STORAGE_URL)
        or DEFAULT_STORAGE_URL,
        cart_key=_get_env("STOREFRONT_CART_KEY", default=DEFAULT_CART_KEY)
        or DEFAULT_CART_KEY,
        merchant_name=_get_env("STOREFRONT_MERCHANT_NAME", default="YourBrand")
        or "YourBrand",
        order_description=_get_env(
            "STOREFRONT_ORDER_DESCRIPTION", default="Order payment"
        ) or "Order payment",
        http_timeout=_get_float("STOREFRONT_HTTP_TIMEOUT", default=10.0),
    )


__all__ = ("Settings", "load_settings")
