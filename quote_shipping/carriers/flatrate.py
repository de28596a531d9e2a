"""Flat rate carrier"""

from ..core.config import FlatRateSettings
from ..models.shipping import ShippingRate
from .base import Carrier, RateRequest


class FlatRateCarrier(Carrier):
    """Fixed price per item or per order for each configured method"""

    code = "flatrate"

    def __init__(self, config: FlatRateSettings):
        super().__init__(config)
        self.config: FlatRateSettings = config

    def get_rates(self, request: RateRequest) -> list[ShippingRate]:
        if request.package_qty <= 0:
            return []

        rates = []
        for method_code, method in self.config.methods.items():
            if self.config.pricing == "per_item":
                price = method.price * request.package_qty
            else:
                price = method.price
            rates.append(self._rate(method_code, method.title, price + self.config.handling_fee))
        return rates
