"""
Shipping method management

Reads and changes the shipping method selected on a cart. Address checks,
rate collection and persistence are delegated to the cart store, the rate
collector and the rate formatter.
"""

import logging
from typing import Optional

from ..core.errors import (
    CouldNotSaveError,
    InputError,
    NoSuchEntityError,
    StateError,
)
from ..database.carts import CartDatabase
from ..models.shipping import ShippingMethod
from .converter import RateFormatter
from .rates import ShippingRateCollector
from .totals import collect_totals

logger = logging.getLogger(__name__)


class ShippingMethodService:
    """Shipping method read/write service for carts"""

    def __init__(
        self,
        cart_store: CartDatabase,
        formatter: RateFormatter,
        rate_collector: ShippingRateCollector,
    ):
        self.cart_store = cart_store
        self.formatter = formatter
        self.rate_collector = rate_collector

    def get(self, cart_id: int) -> Optional[ShippingMethod]:
        """
        Get the shipping method selected on a cart.

        Returns:
            The formatted rate, or None when no method is selected or the
            selected method is no longer offered for the address

        Raises:
            NoSuchEntityError: The cart does not exist or is inactive
            StateError: The shipping address is not set
        """
        cart = self.cart_store.get_active(cart_id)

        shipping_address = cart.shipping_address
        if not shipping_address.country_id:
            raise StateError("Shipping address not set.")

        shipping_method = shipping_address.shipping_method
        if not shipping_method:
            return None

        self.rate_collector.collect_shipping_rates(cart)
        rate = self.rate_collector.get_shipping_rate_by_code(shipping_address, shipping_method)
        if rate is None:
            logger.info(f"Selected shipping method {shipping_method} no longer offered for cart {cart_id}")
            return None
        return self.formatter.format(rate, cart.currency)

    def get_list(self, cart_id: int) -> list[ShippingMethod]:
        """
        List the shipping methods applicable to a cart.

        Empty and virtual-only carts have no applicable methods.

        Raises:
            NoSuchEntityError: The cart does not exist or is inactive
            StateError: The shipping address is not set
        """
        cart = self.cart_store.get_active(cart_id)

        # no methods applicable for empty carts or carts with virtual products
        if cart.is_virtual or cart.items_count == 0:
            return []

        shipping_address = cart.shipping_address
        if not shipping_address.country_id:
            raise StateError("Shipping address not set.")

        self.rate_collector.collect_shipping_rates(cart)
        grouped = self.rate_collector.get_grouped_all_shipping_rates(shipping_address)
        return [
            self.formatter.format(rate, cart.currency)
            for carrier_rates in grouped.values()
            for rate in carrier_rates
        ]

    def set(self, cart_id: int, carrier_code: str, method_code: str) -> bool:
        """
        Select a shipping method for a cart and save it.

        Raises:
            InputError: The cart is empty
            NoSuchEntityError: The cart does not exist, holds only virtual
                products, or the carrier/method pair is not offered
            StateError: The shipping or billing address is not set
            CouldNotSaveError: The cart could not be saved
        """
        cart = self.cart_store.get_active(cart_id)
        if cart.items_count == 0:
            raise InputError("Shipping method is not applicable for empty cart")
        if cart.is_virtual:
            raise NoSuchEntityError(
                "Cart contains virtual product(s) only. Shipping method is not applicable."
            )

        shipping_address = cart.shipping_address
        if not shipping_address.country_id:
            raise StateError("Shipping address is not set")
        if not cart.billing_address.country_id:
            raise StateError("Billing address is not set")

        shipping_address.shipping_method = f"{carrier_code}_{method_code}"
        if not self.rate_collector.request_shipping_rates(cart):
            logger.warning(
                f"Rejected shipping method {carrier_code}_{method_code} for cart {cart_id}"
            )
            raise NoSuchEntityError(
                f"Carrier with such method not found: {carrier_code}, {method_code}"
            )

        try:
            self.cart_store.save(collect_totals(cart))
        except Exception as e:
            logger.error(f"Failed to save shipping method for cart {cart_id}: {e}")
            raise CouldNotSaveError(f"Cannot set shipping method. {e}") from e

        logger.info(f"Cart {cart_id} shipping method set to {shipping_address.shipping_method}")
        return True
