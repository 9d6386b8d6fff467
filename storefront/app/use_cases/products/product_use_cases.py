"""
Product Catalog Use Cases
"""

from uuid import UUID

from storefront.app.services.unit_of_work import UnitOfWork
from storefront.domain.entities import Product
from storefront.libs.result import Error, Result, Return
from .dtos import NewProductCommand, ProductInfo, ProductResponse, ProductsListResponse


class ListProductsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[ProductsListResponse]:
        async with self.uow:
            products = await self.uow.products.list_all()
            return Return.ok(
                ProductsListResponse(products=[ProductInfo.from_entity(p) for p in products])
            )


class GetProductUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, product_id: UUID) -> Result[ProductResponse]:
        async with self.uow:
            product = await self.uow.products.get_by_id(product_id)
            if product is None:
                return Return.err(Error("PRODUCT_NOT_FOUND", "Product not found"))
            return Return.ok(ProductResponse(product=ProductInfo.from_entity(product)))


class CreateProductUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: NewProductCommand) -> Result[ProductResponse]:
        async with self.uow:
            product = await self.uow.products.create(Product(**command.model_dump()))
            await self.uow.commit()
            return Return.ok(ProductResponse(product=ProductInfo.from_entity(product)))
