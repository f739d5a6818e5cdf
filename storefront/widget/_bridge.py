"""
Callback bridge — turns the widget's two callbacks into one awaitable outcome.
"""

from __future__ import annotations

import asyncio

from storefront.gateway import PaymentPayload
from storefront.widget._types import (
    WidgetFactory,
    WidgetOptions,
    WidgetOutcome,
    Completed,
    Dismissed,
)


async def open_widget(factory: WidgetFactory, options: WidgetOptions) -> WidgetOutcome:
    """
    Open the widget and wait for it to complete or be dismissed.

    Only the first callback counts. Cancelling the awaiting task cancels the
    wait; the widget itself is not told.

    Example:
        match await open_widget(factory, options):
            case Completed(payload):
                await gateway.verify(payload)
            case Dismissed():
                ...
    """
    loop = asyncio.get_running_loop()
    outcome: asyncio.Future[WidgetOutcome] = loop.create_future()

    def settle(value: WidgetOutcome) -> None:
        if not outcome.done():
            outcome.set_result(value)

    def on_complete(payload: PaymentPayload) -> None:
        loop.call_soon_threadsafe(settle, Completed(payload))

    def on_dismiss() -> None:
        loop.call_soon_threadsafe(settle, Dismissed())

    widget = factory(options, on_complete, on_dismiss)
    widget.open()
    return await outcome


__all__ = ("open_widget",)
