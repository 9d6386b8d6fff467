from datetime import datetime
from typing import List

from pydantic import BaseModel, Field

from storefront.domain.entities import Product


class NewProductCommand(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    price: float = Field(..., ge=0)
    category: str = Field(default="", max_length=100)
    stock: int = Field(default=0, ge=0)


class ProductInfo(BaseModel):
    id: str
    name: str
    description: str
    price: float
    category: str
    stock: int
    created_at: datetime

    @classmethod
    def from_entity(cls, product: Product) -> "ProductInfo":
        return cls(
            id=str(product.id),
            name=product.name,
            description=product.description,
            price=product.price,
            category=product.category,
            stock=product.stock,
            created_at=product.created_at,
        )


class ProductResponse(BaseModel):
    product: ProductInfo


class ProductsListResponse(BaseModel):
    products: List[ProductInfo]
