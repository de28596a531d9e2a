"""Cart API routes for the quote shipping service"""

from typing import Optional
from fastapi import APIRouter, HTTPException, Depends, Body

from ..core.config import Settings, get_settings
from ..core.dependencies import get_cart_store, get_product_catalog
from ..database.carts import CartDatabase
from ..database.products import ProductDatabase
from ..models.cart import (
    AddressRequest,
    AddressType,
    AddToCartRequest,
    CartResponse,
    CreateCartRequest,
)

router = APIRouter(prefix="/api/carts", tags=["Cart"])


@router.post("", response_model=CartResponse)
async def create_cart(
    request: Optional[CreateCartRequest] = Body(None),
    carts: CartDatabase = Depends(get_cart_store),
    settings: Settings = Depends(get_settings),
):
    """Create a new shopping cart"""
    currency = (request.currency if request else None) or settings.base_currency
    cart = carts.create_cart(currency=currency)
    return CartResponse(cart=cart, message="Cart created")


@router.get("/{cart_id}", response_model=CartResponse)
async def get_cart(
    cart_id: int,
    carts: CartDatabase = Depends(get_cart_store),
):
    """Get an active cart by ID"""
    return CartResponse(cart=carts.get_active(cart_id))


@router.post("/{cart_id}/items", response_model=CartResponse)
async def add_to_cart(
    cart_id: int,
    request: AddToCartRequest,
    carts: CartDatabase = Depends(get_cart_store),
    products: ProductDatabase = Depends(get_product_catalog),
):
    """Add an item to the cart"""
    product = products.get_product(request.product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")

    updated_cart = carts.add_item(cart_id, product, request.quantity)
    return CartResponse(
        cart=updated_cart,
        message=f"Added {request.quantity}x {product.name} to cart",
    )


@router.delete("/{cart_id}/items/{product_id}", response_model=CartResponse)
async def remove_from_cart(
    cart_id: int,
    product_id: str,
    carts: CartDatabase = Depends(get_cart_store),
):
    """Remove an item from the cart"""
    updated_cart = carts.remove_item(cart_id, product_id)
    return CartResponse(cart=updated_cart, message="Item removed")


@router.put("/{cart_id}/shipping-address", response_model=CartResponse)
async def set_shipping_address(
    cart_id: int,
    request: AddressRequest,
    carts: CartDatabase = Depends(get_cart_store),
):
    """Set the cart's shipping address"""
    updated_cart = carts.set_address(cart_id, AddressType.SHIPPING, request)
    return CartResponse(cart=updated_cart, message="Shipping address saved")


@router.put("/{cart_id}/billing-address", response_model=CartResponse)
async def set_billing_address(
    cart_id: int,
    request: AddressRequest,
    carts: CartDatabase = Depends(get_cart_store),
):
    """Set the cart's billing address"""
    updated_cart = carts.set_address(cart_id, AddressType.BILLING, request)
    return CartResponse(cart=updated_cart, message="Billing address saved")


@router.delete("/{cart_id}", response_model=CartResponse)
async def deactivate_cart(
    cart_id: int,
    carts: CartDatabase = Depends(get_cart_store),
):
    """Deactivate the cart"""
    updated_cart = carts.deactivate(cart_id)
    return CartResponse(cart=updated_cart, message="Cart deactivated")
