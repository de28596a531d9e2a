"""
Base Carrier Interface

Every carrier turns a RateRequest (destination plus the physical part of
the cart) into zero or more ShippingRate records. Country restrictions and
the "show method when unavailable" behaviour are handled here so concrete
carriers only price the request.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ..core.config import CarrierSettings
from ..models.cart import Cart
from ..models.shipping import ShippingRate


@dataclass
class RateRequest:
    """What carriers need to know to quote a shipment"""
    dest_country_id: str
    dest_region: Optional[str] = None
    dest_postcode: Optional[str] = None
    package_qty: int = 0
    package_value: float = 0.0

    @classmethod
    def from_cart(cls, cart: Cart) -> "RateRequest":
        """Build a request from the shippable items of a cart"""
        address = cart.shipping_address
        physical = [item for item in cart.items if not item.is_virtual]
        return cls(
            dest_country_id=address.country_id or "",
            dest_region=address.region,
            dest_postcode=address.postcode,
            package_qty=sum(item.quantity for item in physical),
            package_value=round(sum(item.total_price for item in physical), 2),
        )


class Carrier(ABC):
    """Abstract base class for shipping carriers"""

    code: str = "base"

    def __init__(self, config: CarrierSettings):
        self.config = config

    @property
    def title(self) -> str:
        return self.config.title

    @property
    def active(self) -> bool:
        return self.config.active

    @property
    def sort_order(self) -> int:
        return self.config.sort_order

    def is_country_allowed(self, country_id: str) -> bool:
        allowed = self.config.allowed_countries
        return not allowed or country_id in allowed

    def collect_rates(self, request: RateRequest) -> list[ShippingRate]:
        """Quote the request, honouring country restrictions"""
        if not self.is_country_allowed(request.dest_country_id):
            if self.config.show_method_when_unavailable:
                return [self._error_rate()]
            return []
        return self.get_rates(request)

    @abstractmethod
    def get_rates(self, request: RateRequest) -> list[ShippingRate]:
        """
        Get available shipping rates for this carrier

        Args:
            request: Destination and package details

        Returns:
            List of rates, empty when the carrier does not apply
        """

    def _rate(self, method: str, method_title: str, price: float) -> ShippingRate:
        return ShippingRate(
            carrier=self.code,
            carrier_title=self.title,
            method=method,
            method_title=method_title,
            price=round(price, 2),
            carrier_sort_order=self.sort_order,
        )

    def _error_rate(self) -> ShippingRate:
        return ShippingRate(
            carrier=self.code,
            carrier_title=self.title,
            method="",
            method_title="",
            price=0.0,
            carrier_sort_order=self.sort_order,
            error_message=self.config.error_message,
        )
