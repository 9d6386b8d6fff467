"""
Admin API Routes

Every endpoint here requires an authenticated user with role 'admin'.
"""

from datetime import date
from typing import Any, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from storefront.api.error import raise_for_error
from storefront.app.services.object_storage import ObjectStorage
from storefront.app.services.unit_of_work import UnitOfWork
from storefront.app.use_cases.orders import (
    DeleteOrderUseCase,
    ListOrdersUseCase,
    OrdersListResponse,
    UpdateOrderResponse,
    UpdateOrderUseCase,
)
from storefront.app.use_cases.products import (
    CreateProductUseCase,
    NewProductCommand,
    ProductResponse,
)
from storefront.app.use_cases.sales import ComputeSalesUseCase, SalesReport
from storefront.app.use_cases.users import (
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    SuccessResponse,
    UpdateUserCommand,
    UpdateUserUseCase,
    UserResponse,
    UsersListResponse,
)
from storefront.depends import get_object_storage, get_unit_of_work, require_admin

router = APIRouter(prefix="/admin", dependencies=[Depends(require_admin)])


# ============================================================================
# Users
# ============================================================================


@router.get("/users", status_code=status.HTTP_200_OK, response_model=UsersListResponse)
async def all_users(uow: UnitOfWork = Depends(get_unit_of_work)):
    result = await ListUsersUseCase(uow).execute()

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/users/{user_id}", status_code=status.HTTP_200_OK, response_model=UserResponse)
async def get_user_details(user_id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Raises:
        - 404 Not Found: USER_NOT_FOUND
    """
    result = await GetUserUseCase(uow).execute(user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class UpdateUserRequest(BaseModel):
    name: Optional[str] = Field(default=None, description="Display name (max 50 chars)")
    email: Optional[str] = Field(default=None, description="User email address")
    role: Optional[str] = Field(default=None, description="user or admin")


@router.put("/users/{user_id}", status_code=status.HTTP_200_OK, response_model=UserResponse)
async def update_user(
    user_id: UUID,
    request: UpdateUserRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Raises:
        - 400 Bad Request: VALIDATION_ERROR
        - 404 Not Found: USER_NOT_FOUND
        - 409 Conflict: EMAIL_ALREADY_EXISTS
    """
    command = UpdateUserCommand(name=request.name, email=request.email, role=request.role)
    result = await UpdateUserUseCase(uow).execute(user_id, command, allow_role_change=True)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete("/users/{user_id}", status_code=status.HTTP_200_OK, response_model=SuccessResponse)
async def delete_user(
    user_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
    storage: ObjectStorage = Depends(get_object_storage),
):
    """
    Delete a user and their avatar.

    Raises:
        - 404 Not Found: USER_NOT_FOUND
        - 500 Internal Server Error: UPLOAD_FAILED (avatar could not be removed)
    """
    result = await DeleteUserUseCase(uow, storage).execute(user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


# ============================================================================
# Orders
# ============================================================================


@router.get("/orders", status_code=status.HTTP_200_OK, response_model=OrdersListResponse)
async def all_orders(uow: UnitOfWork = Depends(get_unit_of_work)):
    result = await ListOrdersUseCase(uow).execute()

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class UpdateOrderRequest(BaseModel):
    # Parsed by the use case, after the Delivered check
    status: Any = Field(default=None, description="Shipped or Delivered")


@router.put(
    "/orders/{order_id}", status_code=status.HTTP_200_OK, response_model=UpdateOrderResponse
)
async def update_order(
    order_id: UUID,
    request: UpdateOrderRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Advance an order and take its items out of stock.

    Raises:
        - 400 Bad Request: VALIDATION_ERROR (unknown or backward status)
        - 404 Not Found: ORDER_NOT_FOUND, PRODUCT_NOT_FOUND
        - 409 Conflict: ORDER_ALREADY_DELIVERED, INSUFFICIENT_STOCK
    """
    result = await UpdateOrderUseCase(uow).execute(order_id, request.status)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete(
    "/orders/{order_id}", status_code=status.HTTP_200_OK, response_model=SuccessResponse
)
async def delete_order(order_id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    result = await DeleteOrderUseCase(uow).execute(order_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/get_sales", status_code=status.HTTP_200_OK, response_model=SalesReport)
async def get_sales(
    start_date: date = Query(..., alias="startDate"),
    end_date: date = Query(..., alias="endDate"),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Per-day sales between two dates (inclusive, UTC days).

    Raises:
        - 400 Bad Request: VALIDATION_ERROR (startDate after endDate)
    """
    result = await ComputeSalesUseCase(uow).execute(start_date, end_date)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


# ============================================================================
# Products
# ============================================================================


@router.post("/products", status_code=status.HTTP_201_CREATED, response_model=ProductResponse)
async def new_product(
    request: NewProductCommand,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await CreateProductUseCase(uow).execute(request)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
