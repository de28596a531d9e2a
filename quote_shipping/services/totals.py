"""Cart totals"""

from datetime import datetime

from ..models.cart import Cart


def collect_totals(cart: Cart) -> Cart:
    """Recalculate subtotal, shipping and grand total in place"""
    cart.subtotal = round(sum(item.total_price for item in cart.items), 2)
    cart.shipping_amount = 0.0 if cart.is_virtual else cart.shipping_address.shipping_amount
    cart.grand_total = round(cart.subtotal + cart.shipping_amount, 2)
    cart.updated_at = datetime.utcnow()
    return cart
