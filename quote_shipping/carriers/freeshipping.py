"""Free shipping carrier"""

from ..core.config import FreeShippingSettings
from ..models.shipping import ShippingRate
from .base import Carrier, RateRequest


class FreeShippingCarrier(Carrier):
    """Offers a zero-priced method once the shippable subtotal is high enough"""

    code = "freeshipping"

    def __init__(self, config: FreeShippingSettings):
        super().__init__(config)
        self.config: FreeShippingSettings = config

    def get_rates(self, request: RateRequest) -> list[ShippingRate]:
        if request.package_qty <= 0:
            return []
        if request.package_value < self.config.free_shipping_subtotal:
            return []
        return [self._rate("freeshipping", self.config.method_title, 0.0)]
