from uuid import UUID

from fastapi import APIRouter, Depends, status

from storefront.api.error import raise_for_error
from storefront.app.services.unit_of_work import UnitOfWork
from storefront.app.use_cases.products import (
    GetProductUseCase,
    ListProductsUseCase,
    ProductResponse,
    ProductsListResponse,
)
from storefront.depends import get_unit_of_work

router = APIRouter()


@router.get("/products", status_code=status.HTTP_200_OK, response_model=ProductsListResponse)
async def list_products(uow: UnitOfWork = Depends(get_unit_of_work)):
    result = await ListProductsUseCase(uow).execute()

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/products/{product_id}", status_code=status.HTTP_200_OK, response_model=ProductResponse
)
async def get_product(product_id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Raises:
        - 404 Not Found: PRODUCT_NOT_FOUND
    """
    result = await GetProductUseCase(uow).execute(product_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
