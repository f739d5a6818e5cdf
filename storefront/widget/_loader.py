"""
Widget loading — fetch once, reuse thereafter.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

import httpx
from combinators import lift as L
from kungfu import Result, Ok, Error

from storefront.widget._types import LoadFn, WidgetFactory, WidgetLoadError

logger = logging.getLogger(__name__)


class LazyWidget:
    """
    Loads the widget factory on first use and caches it.

    Note: Failures are not cached, the next checkout attempt loads again.
    """

    def __init__(self, load_fn: LoadFn, *, factory: WidgetFactory | None = None) -> None:
        self._load_fn = load_fn
        self._factory = factory
        self._lock = asyncio.Lock()

    @property
    def loaded(self) -> bool:
        return self._factory is not None

    async def load(self) -> Result[WidgetFactory, WidgetLoadError]:
        async with self._lock:
            if self._factory is not None:
                return Ok(self._factory)

            result = await L.catching_async(
                self._load_fn,
                on_error=lambda e: WidgetLoadError(f"Widget failed to load: {e}", e),
            )
            match result:
                case Ok(factory):
                    self._factory = factory
                    logger.debug("Payment widget loaded")
                case Error(e):
                    logger.warning("%s", e)
            return result


def preinstalled(factory: WidgetFactory) -> LazyWidget:
    """Loader for a widget already present in the environment."""
    return LazyWidget(_never_called, factory=factory)


async def _never_called() -> WidgetFactory:
    raise RuntimeError("preinstalled widget has no loader")


class ScriptWidgetLoader(LazyWidget):
    """
    Fetches the widget script from a fixed URL and installs it via a host hook.

    `install` receives the script body and returns the factory; how a script
    becomes a callable widget is the embedding environment's business.

    Example:
        widget = ScriptWidgetLoader(
            "https://checkout.razorpay.com/v1/checkout.js",
            install=host.install_checkout_script,
        )
    """

    def __init__(
        self,
        url: str,
        install: Callable[[str], WidgetFactory],
        *,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        super().__init__(self._fetch)
        self._url = url
        self._install = install
        self._timeout = timeout
        self._client = client

    async def _fetch(self) -> WidgetFactory:
        if self._client is not None:
            response = await self._client.get(self._url)
        else:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(self._url)
        response.raise_for_status()
        return self._install(response.text)


__all__ = ("LazyWidget", "preinstalled", "ScriptWidgetLoader")
