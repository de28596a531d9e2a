"""Shipping method API routes"""

from typing import Optional
from fastapi import APIRouter, Depends

from ..core.dependencies import get_shipping_method_service
from ..models.shipping import ShippingMethod, SetShippingMethodRequest
from ..services.shipping_methods import ShippingMethodService

router = APIRouter(prefix="/api/carts", tags=["Shipping Methods"])


@router.get("/{cart_id}/selected-shipping-method", response_model=Optional[ShippingMethod])
async def get_selected_shipping_method(
    cart_id: int,
    service: ShippingMethodService = Depends(get_shipping_method_service),
):
    """
    Get the shipping method selected on the cart.

    Returns null when no method is selected.
    """
    return service.get(cart_id)


@router.get("/{cart_id}/shipping-methods", response_model=list[ShippingMethod])
async def list_shipping_methods(
    cart_id: int,
    service: ShippingMethodService = Depends(get_shipping_method_service),
):
    """List shipping methods applicable to the cart"""
    return service.get_list(cart_id)


@router.put("/{cart_id}/selected-shipping-method", response_model=bool)
async def set_shipping_method(
    cart_id: int,
    request: SetShippingMethodRequest,
    service: ShippingMethodService = Depends(get_shipping_method_service),
):
    """Select a carrier/method pair for the cart"""
    return service.set(cart_id, request.carrier_code, request.method_code)
