"""Shipping method selection service for shopping carts"""

__version__ = "1.0.0"
