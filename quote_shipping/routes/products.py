"""Product API routes"""

from fastapi import APIRouter, HTTPException, Depends

from ..core.dependencies import get_product_catalog
from ..database.products import ProductDatabase
from ..models.product import Product

router = APIRouter(prefix="/api/products", tags=["Products"])


@router.get("", response_model=list[Product])
async def list_products(products: ProductDatabase = Depends(get_product_catalog)):
    """List the catalog"""
    return products.get_all_products()


@router.get("/{product_id}", response_model=Product)
async def get_product(
    product_id: str,
    products: ProductDatabase = Depends(get_product_catalog),
):
    """Get a product by ID"""
    product = products.get_product(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product
