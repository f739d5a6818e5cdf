"""
Widget — hosted payment widget, loaded lazily and awaited as one outcome.

    from storefront import widget as W

    loader = W.preinstalled(factory)
    match await loader.load():
        case Ok(factory):
            outcome = await W.open_widget(factory, options)
"""

from __future__ import annotations

from storefront.widget._types import (
    Prefill,
    WidgetOptions,
    Completed,
    Dismissed,
    WidgetOutcome,
    OnComplete,
    OnDismiss,
    PaymentWidget,
    WidgetFactory,
    WidgetLoadError,
    LoadFn,
    WidgetLoader,
)
from storefront.widget._bridge import open_widget
from storefront.widget._loader import LazyWidget, preinstalled, ScriptWidgetLoader

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
    "open_widget",
    "LazyWidget",
    "preinstalled",
    "ScriptWidgetLoader",
)
