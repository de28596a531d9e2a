"""Cart models for the quote shipping service"""

from pydantic import BaseModel, Field, computed_field
from typing import Optional
from datetime import datetime
from enum import Enum

from .shipping import ShippingRate


class AddressType(str, Enum):
    SHIPPING = "shipping"
    BILLING = "billing"


class CartItem(BaseModel):
    """Item in a shopping cart"""
    product_id: str
    product_name: str
    quantity: int = Field(gt=0)
    unit_price: float
    total_price: float
    is_virtual: bool = False


class Address(BaseModel):
    """Cart address. Only the shipping address carries shipping data."""
    address_type: AddressType
    name: Optional[str] = None
    street: Optional[str] = None
    city: Optional[str] = None
    region: Optional[str] = None
    postcode: Optional[str] = None
    country_id: Optional[str] = None

    shipping_method: Optional[str] = None
    shipping_description: Optional[str] = None
    shipping_amount: float = 0.0
    shipping_rates: list[ShippingRate] = []


def _shipping_address() -> Address:
    return Address(address_type=AddressType.SHIPPING)


def _billing_address() -> Address:
    return Address(address_type=AddressType.BILLING)


class Cart(BaseModel):
    """Shopping cart (quote)"""
    cart_id: int
    is_active: bool = True
    items: list[CartItem] = []
    shipping_address: Address = Field(default_factory=_shipping_address)
    billing_address: Address = Field(default_factory=_billing_address)
    subtotal: float = 0.0
    shipping_amount: float = 0.0
    grand_total: float = 0.0
    currency: str = "USD"
    created_at: datetime
    updated_at: datetime

    @computed_field
    @property
    def items_count(self) -> int:
        return len(self.items)

    @computed_field
    @property
    def is_virtual(self) -> bool:
        """True when the cart has items and none of them ship"""
        if not self.items:
            return False
        return all(item.is_virtual for item in self.items)


class CreateCartRequest(BaseModel):
    """Request to create a cart"""
    currency: Optional[str] = None


class AddToCartRequest(BaseModel):
    """Request to add item to cart"""
    product_id: str
    quantity: int = Field(default=1, gt=0)


class AddressRequest(BaseModel):
    """Request to set a cart address"""
    name: Optional[str] = None
    street: Optional[str] = None
    city: Optional[str] = None
    region: Optional[str] = None
    postcode: Optional[str] = None
    country_id: Optional[str] = Field(default=None, max_length=2)


class CartResponse(BaseModel):
    """Cart API response"""
    cart: Cart
    message: Optional[str] = None
