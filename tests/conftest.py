"""Shared fixtures for the quote shipping tests"""

from typing import Optional

import pytest
from fastapi.testclient import TestClient

from quote_shipping.carriers import FlatRateCarrier, FreeShippingCarrier
from quote_shipping.core.config import FlatRateSettings, FreeShippingSettings
from quote_shipping.core.dependencies import get_cart_store
from quote_shipping.database.carts import CartDatabase
from quote_shipping.database.products import product_db
from quote_shipping.main import app
from quote_shipping.models.cart import AddressRequest, AddressType
from quote_shipping.services.converter import RateFormatter
from quote_shipping.services.rates import ShippingRateCollector
from quote_shipping.services.shipping_methods import ShippingMethodService

# prod-002 is a 139.00 jacket, prod-003 a 35.00 tumbler,
# prod-005 an e-book and prod-006 a gift card
SHIPPABLE = "prod-003"
EXPENSIVE = "prod-002"
EBOOK = "prod-005"
GIFT_CARD = "prod-006"


@pytest.fixture
def rate_collector() -> ShippingRateCollector:
    return ShippingRateCollector([
        FlatRateCarrier(FlatRateSettings()),
        FreeShippingCarrier(FreeShippingSettings()),
    ])


@pytest.fixture
def formatter() -> RateFormatter:
    return RateFormatter(base_currency="USD", currency_rates={"USD": 1.0, "EUR": 0.5})


@pytest.fixture
def cart_store(rate_collector, formatter) -> CartDatabase:
    return CartDatabase(rate_collector=rate_collector, currencies=formatter.currency_rates)


@pytest.fixture
def service(cart_store, formatter, rate_collector) -> ShippingMethodService:
    return ShippingMethodService(
        cart_store=cart_store,
        formatter=formatter,
        rate_collector=rate_collector,
    )


@pytest.fixture
def make_cart(cart_store):
    """Create a stored cart and return its id"""

    def _make_cart(
        items: Optional[list[tuple[str, int]]] = None,
        shipping_country: Optional[str] = "US",
        billing_country: Optional[str] = "US",
        currency: str = "USD",
    ) -> int:
        cart = cart_store.create_cart(currency=currency)
        for product_id, quantity in items or []:
            cart_store.add_item(cart.cart_id, product_db.get_product(product_id), quantity)
        cart_store.set_address(
            cart.cart_id,
            AddressType.SHIPPING,
            AddressRequest(country_id=shipping_country, postcode="10001"),
        )
        cart_store.set_address(
            cart.cart_id,
            AddressType.BILLING,
            AddressRequest(country_id=billing_country),
        )
        return cart.cart_id

    return _make_cart


@pytest.fixture
def test_client(cart_store):
    """API client backed by an isolated cart store"""
    app.dependency_overrides[get_cart_store] = lambda: cart_store
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
