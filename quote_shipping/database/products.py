"""Product catalog for the quote shipping service"""

from typing import Optional
from ..models.product import Product, ProductType

# Catalog mixing shippable and virtual products
PRODUCTS: dict[str, Product] = {
    "prod-001": Product(
        id="prod-001",
        name="Sony WH-1000XM5 Wireless Headphones",
        description="Industry-leading noise cancellation with 30-hour battery life.",
        price=349.99,
        sku="SONY-WH1000XM5-BLK",
        weight=0.25,
    ),
    "prod-002": Product(
        id="prod-002",
        name="Patagonia Better Sweater Jacket",
        description="Classic fleece jacket made with recycled polyester.",
        price=139.00,
        sku="PATA-BSJKT-NVY-M",
        weight=0.6,
    ),
    "prod-003": Product(
        id="prod-003",
        name="Yeti Rambler 20 oz Tumbler",
        description="Double-wall vacuum insulated stainless steel tumbler.",
        price=35.00,
        sku="YETI-RAMB20-BLK",
        weight=0.4,
    ),
    "prod-004": Product(
        id="prod-004",
        name="Atomic Habits by James Clear",
        description="An Easy & Proven Way to Build Good Habits & Break Bad Ones. Hardcover.",
        price=24.99,
        sku="BOOK-ATOMIC-HC",
        weight=0.5,
    ),
    "prod-005": Product(
        id="prod-005",
        name="Atomic Habits by James Clear (e-book)",
        description="EPUB and PDF download.",
        price=14.99,
        type=ProductType.DOWNLOADABLE,
        sku="BOOK-ATOMIC-EBOOK",
    ),
    "prod-006": Product(
        id="prod-006",
        name="Gift Card $50",
        description="Delivered by email, redeemable on the whole store.",
        price=50.00,
        type=ProductType.VIRTUAL,
        sku="GIFT-CARD-50",
    ),
}


class ProductDatabase:
    """In-memory product catalog"""

    def __init__(self):
        self.products = PRODUCTS.copy()

    def get_product(self, product_id: str) -> Optional[Product]:
        """Get a product by ID"""
        return self.products.get(product_id)

    def get_all_products(self) -> list[Product]:
        """Get all products"""
        return list(self.products.values())


# Singleton instance
product_db = ProductDatabase()
