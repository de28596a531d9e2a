"""Tests for ShippingMethodService"""

import pytest

from quote_shipping.carriers import FlatRateCarrier, FreeShippingCarrier
from quote_shipping.core.config import FlatRateSettings, FreeShippingSettings
from quote_shipping.core.errors import (
    CouldNotSaveError,
    ErrorKind,
    InputError,
    NoSuchEntityError,
    StateError,
)
from quote_shipping.database.carts import CartDatabase
from quote_shipping.services.rates import ShippingRateCollector
from quote_shipping.services.shipping_methods import ShippingMethodService

from .conftest import EBOOK, EXPENSIVE, GIFT_CARD, SHIPPABLE


class TestGet:

    def test_missing_cart_is_not_found(self, service):
        with pytest.raises(NoSuchEntityError) as exc:
            service.get(999)
        assert exc.value.kind == ErrorKind.NOT_FOUND

    def test_inactive_cart_is_not_found(self, service, cart_store, make_cart):
        cart_id = make_cart(items=[(SHIPPABLE, 1)])
        cart_store.deactivate(cart_id)

        with pytest.raises(NoSuchEntityError):
            service.get(cart_id)

    def test_unset_shipping_country_is_invalid_state(self, service, make_cart):
        cart_id = make_cart(items=[(SHIPPABLE, 1)], shipping_country=None)

        with pytest.raises(StateError, match="Shipping address not set."):
            service.get(cart_id)

    def test_no_selected_method_returns_none(self, service, make_cart):
        cart_id = make_cart(items=[(SHIPPABLE, 1)])
        assert service.get(cart_id) is None

    def test_returns_selected_rate(self, service, make_cart):
        cart_id = make_cart(items=[(SHIPPABLE, 2)])
        service.set(cart_id, "flatrate", "express")

        method = service.get(cart_id)

        assert method.carrier_code == "flatrate"
        assert method.method_code == "express"
        assert method.method_title == "Express"
        assert method.amount == 30.0
        assert method.available is True

    def test_method_no_longer_offered_returns_none(self, cart_store, formatter, make_cart, service):
        cart_id = make_cart(items=[(SHIPPABLE, 1)])
        service.set(cart_id, "flatrate", "standard")

        without_flatrate = ShippingMethodService(
            cart_store=cart_store,
            formatter=formatter,
            rate_collector=ShippingRateCollector([
                FlatRateCarrier(FlatRateSettings(active=False)),
                FreeShippingCarrier(FreeShippingSettings()),
            ]),
        )

        assert without_flatrate.get(cart_id) is None
        # reading never persists the reset selection
        assert cart_store.get_active(cart_id).shipping_address.shipping_method == "flatrate_standard"

    def test_amount_in_quote_currency(self, service, make_cart):
        cart_id = make_cart(items=[(SHIPPABLE, 1)], currency="EUR")
        service.set(cart_id, "flatrate", "standard")

        method = service.get(cart_id)

        assert method.currency_code == "EUR"
        assert method.base_amount == 5.0
        assert method.amount == 2.5


class TestGetList:

    def test_virtual_cart_returns_empty(self, service, make_cart):
        cart_id = make_cart(items=[(GIFT_CARD, 1), (EBOOK, 1)], shipping_country=None)
        assert service.get_list(cart_id) == []

    def test_empty_cart_returns_empty(self, service, make_cart):
        cart_id = make_cart(shipping_country=None)
        assert service.get_list(cart_id) == []

    def test_unset_shipping_country_is_invalid_state(self, service, make_cart):
        cart_id = make_cart(items=[(SHIPPABLE, 1)], shipping_country=None)

        with pytest.raises(StateError):
            service.get_list(cart_id)

    def test_missing_cart_is_not_found(self, service):
        with pytest.raises(NoSuchEntityError):
            service.get_list(42)

    def test_lists_rates_in_carrier_order(self, service, make_cart):
        cart_id = make_cart(items=[(EXPENSIVE, 1)])

        methods = service.get_list(cart_id)

        assert [(m.carrier_code, m.method_code) for m in methods] == [
            ("flatrate", "standard"),
            ("flatrate", "express"),
            ("freeshipping", "freeshipping"),
        ]
        assert [m.amount for m in methods] == [5.0, 15.0, 0.0]

    def test_carrier_sort_order_controls_grouping(self, cart_store, formatter, make_cart):
        service = ShippingMethodService(
            cart_store=cart_store,
            formatter=formatter,
            rate_collector=ShippingRateCollector([
                FlatRateCarrier(FlatRateSettings(sort_order=30)),
                FreeShippingCarrier(FreeShippingSettings(sort_order=1)),
            ]),
        )
        cart_id = make_cart(items=[(EXPENSIVE, 1)])

        carriers = [m.carrier_code for m in service.get_list(cart_id)]

        assert carriers == ["freeshipping", "flatrate", "flatrate"]

    def test_mixed_cart_only_prices_physical_items(self, service, make_cart):
        cart_id = make_cart(items=[(SHIPPABLE, 1), (GIFT_CARD, 3)])

        methods = service.get_list(cart_id)

        assert [m.amount for m in methods] == [5.0, 15.0]


class TestSet:

    def test_scenario_select_then_read(self, service, cart_store, make_cart):
        for _ in range(4):
            cart_store.create_cart("USD")
        cart_id = make_cart(items=[(SHIPPABLE, 1)])
        assert cart_id == 5

        assert service.set(5, "flatrate", "standard") is True

        method = service.get(5)
        assert method.carrier_code == "flatrate"
        assert method.method_code == "standard"
        assert method.amount == 5.0

    def test_persists_method_and_totals(self, service, cart_store, make_cart):
        cart_id = make_cart(items=[(SHIPPABLE, 2)])

        service.set(cart_id, "flatrate", "standard")

        cart = cart_store.get_active(cart_id)
        assert cart.shipping_address.shipping_method == "flatrate_standard"
        assert cart.shipping_address.shipping_description == "Flat Rate - Standard"
        assert cart.shipping_amount == 10.0
        assert cart.subtotal == 70.0
        assert cart.grand_total == 80.0

    def test_missing_cart_is_not_found(self, service):
        with pytest.raises(NoSuchEntityError):
            service.set(7, "flatrate", "standard")

    def test_empty_cart_is_invalid_input_before_address_checks(self, service, make_cart):
        cart_id = make_cart(shipping_country=None, billing_country=None)

        with pytest.raises(InputError, match="not applicable for empty cart") as exc:
            service.set(cart_id, "flatrate", "standard")
        assert exc.value.kind == ErrorKind.INVALID_INPUT

    def test_virtual_cart_is_not_found_before_address_checks(self, service, make_cart):
        cart_id = make_cart(items=[(GIFT_CARD, 1)], shipping_country=None, billing_country=None)

        with pytest.raises(NoSuchEntityError, match="virtual product"):
            service.set(cart_id, "flatrate", "standard")

    def test_unset_shipping_country_checked_before_billing(self, service, make_cart):
        cart_id = make_cart(items=[(SHIPPABLE, 1)], shipping_country=None, billing_country=None)

        with pytest.raises(StateError, match="Shipping address is not set"):
            service.set(cart_id, "flatrate", "standard")

    def test_unset_billing_country_is_invalid_state(self, service, make_cart):
        cart_id = make_cart(items=[(SHIPPABLE, 1)], billing_country=None)

        with pytest.raises(StateError, match="Billing address is not set") as exc:
            service.set(cart_id, "flatrate", "standard")
        assert exc.value.kind == ErrorKind.INVALID_STATE

    def test_unknown_method_is_not_found_and_not_saved(self, service, cart_store, make_cart):
        cart_id = make_cart(items=[(SHIPPABLE, 1)])
        before = cart_store.get_active(cart_id)

        with pytest.raises(NoSuchEntityError, match="Carrier with such method not found: ups, ground"):
            service.set(cart_id, "ups", "ground")

        after = cart_store.get_active(cart_id)
        assert after.shipping_address.shipping_method is None
        assert after == before

    def test_unknown_method_keeps_previous_selection(self, service, cart_store, make_cart):
        cart_id = make_cart(items=[(SHIPPABLE, 1)])
        service.set(cart_id, "flatrate", "standard")

        with pytest.raises(NoSuchEntityError):
            service.set(cart_id, "flatrate", "overnight")

        assert cart_store.get_active(cart_id).shipping_address.shipping_method == "flatrate_standard"

    def test_free_shipping_below_threshold_is_not_found(self, service, make_cart):
        cart_id = make_cart(items=[(SHIPPABLE, 1)])

        with pytest.raises(NoSuchEntityError):
            service.set(cart_id, "freeshipping", "freeshipping")

    def test_save_failure_wraps_cause(self, formatter, rate_collector, make_cart, cart_store):
        cart_id = make_cart(items=[(SHIPPABLE, 1)])

        class FailingCartDatabase(CartDatabase):
            def save(self, cart):
                raise RuntimeError("storage unavailable")

        failing = FailingCartDatabase(rate_collector, currencies=["USD"])
        failing.carts = cart_store.carts
        service = ShippingMethodService(
            cart_store=failing,
            formatter=formatter,
            rate_collector=rate_collector,
        )

        with pytest.raises(CouldNotSaveError) as exc:
            service.set(cart_id, "flatrate", "standard")

        assert exc.value.kind == ErrorKind.SAVE_FAILED
        assert str(exc.value) == "Cannot set shipping method. storage unavailable"
        assert isinstance(exc.value.__cause__, RuntimeError)
        assert cart_store.get_active(cart_id).shipping_address.shipping_method is None
