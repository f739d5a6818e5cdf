"""
Session — one visitor's catalog, cart and checkout, wired together.

Usage:
    session = Session.open(load_settings(), widget=W.preinstalled(factory))

    session.add_item("p1")
    print(session.totals().total)

    session.checkout.begin()
    result = await session.checkout.submit_contact(contact)

    await session.aclose()
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from kungfu import Result, Ok, Error
from sqlalchemy import Engine

from storefront._types import ProductId
from storefront.config import Settings
from storefront.catalog import CatalogProvider, Product, sample_catalog
from storefront.cart import CartStore, LineItem
from storefront.checkout import CheckoutCoordinator, CheckoutInProgressError
from storefront.gateway import GatewayClient, HttpGatewayClient
from storefront.pricing import PriceBreakdown, price
from storefront.storage import MemoryStorage, Storage, StorageError, create_storage
from storefront.widget import ScriptWidgetLoader, WidgetFactory, WidgetLoader

logger = logging.getLogger(__name__)


class Session:
    """
    Owns the components of one storefront session.

    Cart mutations go through the session so they can be refused while a
    checkout is in flight; the coordinator reads the same cart.
    """

    def __init__(
        self,
        catalog: CatalogProvider,
        cart: CartStore,
        checkout: CheckoutCoordinator,
        *,
        gateway: HttpGatewayClient | None = None,
        engine: Engine | None = None,
        storage_error: StorageError | None = None,
    ) -> None:
        self.catalog = catalog
        self._cart = cart
        self.checkout = checkout
        self._owned_gateway = gateway
        self._owned_engine = engine
        self._open_error = storage_error

    @classmethod
    def open(
        cls,
        settings: Settings,
        gateway: GatewayClient | None = None,
        widget: WidgetLoader | None = None,
        storage: Storage | None = None,
        catalog: CatalogProvider | None = None,
        *,
        install: Callable[[str], WidgetFactory] | None = None,
    ) -> Session:
        """
        Build a session from settings, filling in any collaborator not given.

        Without `widget`, the checkout script is fetched from
        `settings.widget_script_url` and handed to `install`; one of the two
        must be provided.
        """
        if widget is None:
            if install is None:
                raise ValueError("Session.open needs either widget= or install=")
            widget = ScriptWidgetLoader(
                settings.widget_script_url, install, timeout=settings.http_timeout
            )

        owned_gateway: HttpGatewayClient | None = None
        if gateway is None:
            owned_gateway = HttpGatewayClient(
                settings.api_base_url,
                create_order_path=settings.create_order_path,
                verify_path=settings.verify_path,
                timeout=settings.http_timeout,
            )
            gateway = owned_gateway

        engine: Engine | None = None
        storage_error: StorageError | None = None
        if storage is None:
            match create_storage(settings.storage_url):
                case Ok((storage, engine)):
                    pass
                case Error(storage_error):
                    logger.warning("Storage unavailable, cart kept in memory: %s", storage_error)
                    storage = MemoryStorage()

        if catalog is None:
            catalog = sample_catalog()
        cart = CartStore.load(storage, settings.cart_key)
        checkout = CheckoutCoordinator(
            cart,
            catalog,
            gateway,
            widget,
            merchant_name=settings.merchant_name,
            description=settings.order_description,
        )
        logger.debug("Session opened with %d cart entries", len(cart))
        return cls(
            catalog,
            cart,
            checkout,
            gateway=owned_gateway,
            engine=engine,
            storage_error=storage_error,
        )

    # ═══════════════════════════════════════════════════════════════════════════
    # Cart
    # ═══════════════════════════════════════════════════════════════════════════

    def add_item(self, product_id: ProductId) -> Result[None, CheckoutInProgressError]:
        if self.checkout.busy:
            return Error(CheckoutInProgressError())
        self._cart.add_item(product_id)
        return Ok(None)

    def set_quantity(
        self, product_id: ProductId, qty: int
    ) -> Result[None, CheckoutInProgressError]:
        if self.checkout.busy:
            return Error(CheckoutInProgressError())
        self._cart.set_quantity(product_id, qty)
        return Ok(None)

    def clear_cart(self) -> Result[None, CheckoutInProgressError]:
        if self.checkout.busy:
            return Error(CheckoutInProgressError())
        self._cart.clear()
        return Ok(None)

    # ═══════════════════════════════════════════════════════════════════════════
    # Views
    # ═══════════════════════════════════════════════════════════════════════════

    def products(self) -> Sequence[Product]:
        return self.catalog.list()

    def cart_entries(self) -> dict[ProductId, int]:
        return self._cart.entries()

    @property
    def storage_error(self) -> StorageError | None:
        """Why the cart is held in memory only, or the last failed write."""
        return self._open_error or self._cart.last_storage_error

    def line_items(self) -> list[LineItem]:
        return self._cart.materialize(self.catalog)

    def totals(self) -> PriceBreakdown:
        return price(self.line_items())

    # ═══════════════════════════════════════════════════════════════════════════
    # Lifecycle
    # ═══════════════════════════════════════════════════════════════════════════

    async def aclose(self) -> None:
        """Release the HTTP client and database engine this session created."""
        if self._owned_gateway is not None:
            await self._owned_gateway.aclose()
        if self._owned_engine is not None:
            self._owned_engine.dispose()


__all__ = ("Session",)
