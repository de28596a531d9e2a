"""FastAPI dependencies wiring the service layer together"""

from functools import lru_cache

from fastapi import Depends

from ..database.carts import CartDatabase, cart_db
from ..database.products import ProductDatabase, product_db
from ..services.converter import RateFormatter
from ..services.rates import ShippingRateCollector
from ..services.shipping_methods import ShippingMethodService
from .config import get_settings


def get_cart_store() -> CartDatabase:
    return cart_db


def get_product_catalog() -> ProductDatabase:
    return product_db


def get_rate_collector(
    cart_store: CartDatabase = Depends(get_cart_store),
) -> ShippingRateCollector:
    """The collector the cart store re-collects with, so both agree on carriers"""
    return cart_store.rate_collector


@lru_cache()
def get_rate_formatter() -> RateFormatter:
    settings = get_settings()
    return RateFormatter(
        base_currency=settings.base_currency,
        currency_rates=settings.currency_rates,
    )


def get_shipping_method_service(
    cart_store: CartDatabase = Depends(get_cart_store),
    formatter: RateFormatter = Depends(get_rate_formatter),
    rate_collector: ShippingRateCollector = Depends(get_rate_collector),
) -> ShippingMethodService:
    return ShippingMethodService(
        cart_store=cart_store,
        formatter=formatter,
        rate_collector=rate_collector,
    )
