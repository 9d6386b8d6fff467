"""
Product Catalog Use Cases
"""

from .product_use_cases import CreateProductUseCase, GetProductUseCase, ListProductsUseCase
from .dtos import NewProductCommand, ProductInfo, ProductResponse, ProductsListResponse

__all__ = [
    "ListProductsUseCase",
    "GetProductUseCase",
    "CreateProductUseCase",
    "NewProductCommand",
    "ProductInfo",
    "ProductResponse",
    "ProductsListResponse",
]
