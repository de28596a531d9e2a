"""Product models for the quote shipping service"""

from pydantic import BaseModel, Field
from typing import Optional
from enum import Enum


class ProductType(str, Enum):
    SIMPLE = "simple"
    VIRTUAL = "virtual"
    DOWNLOADABLE = "downloadable"


class Product(BaseModel):
    """Product in the catalog"""
    id: str
    name: str
    description: str
    price: float = Field(gt=0)
    type: ProductType = ProductType.SIMPLE
    sku: str
    weight: Optional[float] = None

    @property
    def is_virtual(self) -> bool:
        """Virtual and downloadable products are never shipped"""
        return self.type != ProductType.SIMPLE
