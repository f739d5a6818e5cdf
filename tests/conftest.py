from __future__ import annotations

import pytest

from storefront.cart import CartStore
from storefront.catalog import StaticCatalog, sample_catalog
from storefront.checkout import CheckoutCoordinator
from storefront.storage import MemoryStorage
from storefront.widget import LazyWidget, preinstalled

from fakes import FakeGateway, WidgetHost


@pytest.fixture
def catalog() -> StaticCatalog:
    return sample_catalog()


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def cart(storage: MemoryStorage) -> CartStore:
    return CartStore.load(storage)


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def host() -> WidgetHost:
    return WidgetHost()


@pytest.fixture
def widget(host: WidgetHost) -> LazyWidget:
    return preinstalled(host)


@pytest.fixture
def coordinator(
    cart: CartStore, catalog: StaticCatalog, gateway: FakeGateway, widget: LazyWidget
) -> CheckoutCoordinator:
    return CheckoutCoordinator(cart, catalog, gateway, widget)
