"""
Shipping rate collection

Asks the configured carriers for quotes and keeps them on the cart's
shipping address. Works on the cart instance it is given; nothing is
persisted here.
"""

import logging
from typing import Optional

from ..carriers import Carrier, FlatRateCarrier, FreeShippingCarrier, RateRequest
from ..core.config import Settings
from ..models.cart import Address, Cart
from ..models.shipping import ShippingRate

logger = logging.getLogger(__name__)


class ShippingRateCollector:
    """Collects carrier rates for a cart's shipping address"""

    def __init__(self, carriers: list[Carrier]):
        self.carriers = sorted(carriers, key=lambda c: c.sort_order)

    def collect_shipping_rates(self, cart: Cart) -> Cart:
        """
        Refresh the rates on the shipping address.

        When the currently selected method is no longer offered, or the
        address has no country, the selection and its amount are reset.
        """
        address = cart.shipping_address
        address.shipping_rates = []
        if not address.country_id or not self.request_shipping_rates(cart):
            address.shipping_method = None
            address.shipping_description = None
            address.shipping_amount = 0.0
        return cart

    def request_shipping_rates(self, cart: Cart) -> bool:
        """
        Request rates from every active carrier.

        Returns:
            True if the selected shipping method matches an available rate
        """
        address = cart.shipping_address
        request = RateRequest.from_cart(cart)

        rates: list[ShippingRate] = []
        for carrier in self.carriers:
            if not carrier.active:
                continue
            rates.extend(carrier.collect_rates(request))
        address.shipping_rates = rates

        found = False
        for rate in rates:
            if rate.error_message is None and rate.code == address.shipping_method:
                address.shipping_amount = rate.price
                address.shipping_description = f"{rate.carrier_title} - {rate.method_title}"
                found = True

        logger.debug(
            f"Collected {len(rates)} rate(s) for cart {cart.cart_id} "
            f"to {request.dest_country_id}, selected={address.shipping_method} found={found}"
        )
        return found

    def get_grouped_all_shipping_rates(self, address: Address) -> dict[str, list[ShippingRate]]:
        """Rates grouped by carrier, groups ordered by carrier sort order"""
        ordered = sorted(address.shipping_rates, key=lambda r: r.carrier_sort_order)
        grouped: dict[str, list[ShippingRate]] = {}
        for rate in ordered:
            grouped.setdefault(rate.carrier, []).append(rate)
        return grouped

    def get_shipping_rate_by_code(self, address: Address, code: str) -> Optional[ShippingRate]:
        return next(
            (rate for rate in address.shipping_rates if rate.code == code),
            None,
        )


def build_rate_collector(settings: Settings) -> ShippingRateCollector:
    """Rate collector for the carriers configured in settings"""
    return ShippingRateCollector([
        FlatRateCarrier(settings.flatrate),
        FreeShippingCarrier(settings.freeshipping),
    ])
