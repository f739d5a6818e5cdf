"""
Widget types — hosted payment widget contract.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from decimal import Decimal
from typing import Protocol

from kungfu import Result

from storefront.gateway import PaymentPayload

# ═══════════════════════════════════════════════════════════════════════════════
# Options
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Prefill:
    name: str = ""
    email: str = ""


@dataclass(frozen=True, slots=True)
class WidgetOptions:
    key: str
    amount: Decimal
    currency: str
    order_id: str
    name: str = ""
    description: str = ""
    prefill: Prefill = Prefill()


# ═══════════════════════════════════════════════════════════════════════════════
# Outcomes
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Completed:
    """The widget finished and handed back the gateway's payment response."""

    payload: PaymentPayload


@dataclass(frozen=True, slots=True)
class Dismissed:
    """The user closed the widget without paying."""


type WidgetOutcome = Completed | Dismissed

# ═══════════════════════════════════════════════════════════════════════════════
# Widget Protocol
# ═══════════════════════════════════════════════════════════════════════════════

type OnComplete = Callable[[PaymentPayload], None]
type OnDismiss = Callable[[], None]


class PaymentWidget(Protocol):
    def open(self) -> None:
        """Fire-and-forget; everything after happens through the callbacks."""
        ...


type WidgetFactory = Callable[[WidgetOptions, OnComplete, OnDismiss], PaymentWidget]
"""Instantiates a widget bound to one order and its two callbacks."""

# ═══════════════════════════════════════════════════════════════════════════════
# Loading
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class WidgetLoadError:
    message: str
    cause: Exception | None = None

    def __str__(self) -> str:
        return self.message


type LoadFn = Callable[[], Awaitable[WidgetFactory]]


class WidgetLoader(Protocol):
    async def load(self) -> Result[WidgetFactory, WidgetLoadError]:
        """Return the widget factory, loading it on first use."""
        ...


__all__ = (
    "Prefill",
    "WidgetOptions",
    "Completed",
    "Dismissed",
    "WidgetOutcome",
    "OnComplete",
    "OnDismiss",
    "PaymentWidget",
    "WidgetFactory",
    "WidgetLoadError",
    "LoadFn",
    "WidgetLoader",
)
