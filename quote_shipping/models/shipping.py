"""Shipping rate models"""

from pydantic import BaseModel, computed_field
from typing import Optional


class ShippingRate(BaseModel):
    """A carrier quote collected for one shipping address"""
    carrier: str
    carrier_title: str
    method: str
    method_title: str
    price: float
    carrier_sort_order: int = 0
    error_message: Optional[str] = None

    @computed_field
    @property
    def code(self) -> str:
        return f"{self.carrier}_{self.method}"


class ShippingMethod(BaseModel):
    """Shipping rate as returned to API callers"""
    carrier_code: str
    method_code: str
    carrier_title: str
    method_title: str
    amount: float
    base_amount: float
    currency_code: str
    available: bool = True
    error_message: Optional[str] = None


class SetShippingMethodRequest(BaseModel):
    """Request to select a shipping method for a cart"""
    carrier_code: str
    method_code: str
