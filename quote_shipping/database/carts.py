"""Cart storage for the quote shipping service"""

import itertools
import logging
from datetime import datetime
from typing import Iterable, Optional

from ..core.config import settings
from ..core.errors import InputError, NoSuchEntityError
from ..models.cart import Address, AddressRequest, AddressType, Cart, CartItem
from ..models.product import Product
from ..services.rates import ShippingRateCollector, build_rate_collector
from ..services.totals import collect_totals

logger = logging.getLogger(__name__)


class CartDatabase:
    """
    In-memory cart storage.

    Carts are handed out and stored as deep copies, so changes made by a
    caller are only visible to others after save(). Item and shipping
    address changes re-collect rates, so a saved shipping method is always
    one the carriers still offer.
    """

    def __init__(self, rate_collector: ShippingRateCollector, currencies: Iterable[str]):
        self.carts: dict[int, Cart] = {}
        self._ids = itertools.count(1)
        self.rate_collector = rate_collector
        self.currencies = sorted(currencies)

    def create_cart(self, currency: str) -> Cart:
        """
        Create a new cart quoted in the given currency.

        Raises:
            InputError: The currency has no configured rate
        """
        if currency not in self.currencies:
            raise InputError(
                f"Unsupported currency {currency}. Available: {', '.join(self.currencies)}"
            )

        now = datetime.utcnow()
        cart = Cart(
            cart_id=next(self._ids),
            currency=currency,
            created_at=now,
            updated_at=now,
        )
        self.carts[cart.cart_id] = cart
        logger.info(f"Created cart {cart.cart_id} ({currency})")
        return cart.model_copy(deep=True)

    def get_cart(self, cart_id: int) -> Optional[Cart]:
        """Get a cart by ID, active or not"""
        cart = self.carts.get(cart_id)
        return cart.model_copy(deep=True) if cart else None

    def get_active(self, cart_id: int) -> Cart:
        """
        Get an active cart by ID.

        Raises:
            NoSuchEntityError: The cart does not exist or is inactive
        """
        cart = self.carts.get(cart_id)
        if not cart or not cart.is_active:
            raise NoSuchEntityError(f"No such entity with cartId = {cart_id}")
        return cart.model_copy(deep=True)

    def save(self, cart: Cart) -> None:
        """Persist a cart previously created by this store"""
        if cart.cart_id not in self.carts:
            raise LookupError(f"Cart {cart.cart_id} does not exist in storage")
        self.carts[cart.cart_id] = cart.model_copy(deep=True)

    def add_item(self, cart_id: int, product: Product, quantity: int = 1) -> Cart:
        """Add an item to the cart"""
        cart = self.get_active(cart_id)

        # Check if product already in cart
        existing_item = next(
            (item for item in cart.items if item.product_id == product.id),
            None,
        )

        if existing_item:
            existing_item.quantity += quantity
            existing_item.total_price = round(existing_item.unit_price * existing_item.quantity, 2)
        else:
            cart.items.append(
                CartItem(
                    product_id=product.id,
                    product_name=product.name,
                    quantity=quantity,
                    unit_price=product.price,
                    total_price=round(product.price * quantity, 2),
                    is_virtual=product.is_virtual,
                )
            )

        self._refresh_shipping(cart)
        return cart

    def remove_item(self, cart_id: int, product_id: str) -> Cart:
        """Remove an item from the cart"""
        cart = self.get_active(cart_id)
        if not any(item.product_id == product_id for item in cart.items):
            raise NoSuchEntityError(f"Product {product_id} is not in cart {cart_id}")

        cart.items = [i for i in cart.items if i.product_id != product_id]
        self._refresh_shipping(cart)
        return cart

    def set_address(
        self,
        cart_id: int,
        address_type: AddressType,
        data: AddressRequest,
    ) -> Cart:
        """Replace the contact fields of a cart address"""
        cart = self.get_active(cart_id)

        if address_type == AddressType.SHIPPING:
            current = cart.shipping_address
            cart.shipping_address = Address(
                address_type=address_type,
                shipping_method=current.shipping_method,
                shipping_description=current.shipping_description,
                shipping_amount=current.shipping_amount,
                **data.model_dump(),
            )
            self._refresh_shipping(cart)
        else:
            cart.billing_address = Address(address_type=address_type, **data.model_dump())
            cart.updated_at = datetime.utcnow()
            self.save(cart)
        return cart

    def deactivate(self, cart_id: int) -> Cart:
        """Mark a cart inactive so it can no longer be changed"""
        cart = self.get_active(cart_id)
        cart.is_active = False
        cart.updated_at = datetime.utcnow()
        self.save(cart)
        logger.info(f"Deactivated cart {cart_id}")
        return cart

    def _refresh_shipping(self, cart: Cart) -> None:
        """Re-collect rates, recalculate totals and persist"""
        selected = cart.shipping_address.shipping_method
        self.rate_collector.collect_shipping_rates(cart)
        if selected and not cart.shipping_address.shipping_method:
            logger.info(f"Shipping method {selected} no longer offered for cart {cart.cart_id}, cleared")
        self.save(collect_totals(cart))


# Singleton instance
cart_db = CartDatabase(
    rate_collector=build_rate_collector(settings),
    currencies=settings.currency_rates,
)
