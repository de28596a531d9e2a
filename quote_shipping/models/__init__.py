# Quote Shipping Models

from .product import Product, ProductType
from .shipping import ShippingRate, ShippingMethod, SetShippingMethodRequest
from .cart import (
    Address,
    AddressRequest,
    AddressType,
    AddToCartRequest,
    Cart,
    CartItem,
    CartResponse,
    CreateCartRequest,
)

__all__ = [
    "Product",
    "ProductType",
    "ShippingRate",
    "ShippingMethod",
    "SetShippingMethodRequest",
    "Address",
    "AddressRequest",
    "AddressType",
    "AddToCartRequest",
    "Cart",
    "CartItem",
    "CartResponse",
    "CreateCartRequest",
]
