"""Converts collected rates into API-facing shipping methods"""

from ..core.errors import StateError
from ..models.shipping import ShippingMethod, ShippingRate


class RateFormatter:
    """Formats a ShippingRate in the quote currency of a cart"""

    def __init__(self, base_currency: str, currency_rates: dict[str, float]):
        self.base_currency = base_currency
        self.currency_rates = currency_rates

    def convert_price(self, price: float, currency_code: str) -> float:
        if currency_code == self.base_currency:
            return round(price, 2)
        if currency_code not in self.currency_rates:
            raise StateError(f"Currency rate is not configured for {currency_code}")
        return round(price * self.currency_rates[currency_code], 2)

    def format(self, rate: ShippingRate, currency_code: str) -> ShippingMethod:
        return ShippingMethod(
            carrier_code=rate.carrier,
            method_code=rate.method,
            carrier_title=rate.carrier_title,
            method_title=rate.method_title,
            amount=self.convert_price(rate.price, currency_code),
            base_amount=rate.price,
            currency_code=currency_code,
            available=rate.error_message is None,
            error_message=rate.error_message,
        )
