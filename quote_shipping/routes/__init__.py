# API Routes

from .products import router as products_router
from .cart import router as cart_router
from .shipping_methods import router as shipping_methods_router

__all__ = ["products_router", "cart_router", "shipping_methods_router"]
