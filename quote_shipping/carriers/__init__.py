# Shipping carriers

from .base import Carrier, RateRequest
from .flatrate import FlatRateCarrier
from .freeshipping import FreeShippingCarrier

__all__ = ["Carrier", "RateRequest", "FlatRateCarrier", "FreeShippingCarrier"]
