from uuid import UUID

from fastapi import APIRouter, Depends, status

from storefront.api.error import raise_for_error
from storefront.app.services.unit_of_work import UnitOfWork
from storefront.app.use_cases.orders import (
    CreateOrderUseCase,
    GetOrderUseCase,
    ListOrdersUseCase,
    NewOrderCommand,
    OrderDetailResponse,
    OrderResponse,
    OrdersListResponse,
)
from storefront.depends import CurrentUser, get_current_user, get_unit_of_work

router = APIRouter()


@router.post("/orders/new", status_code=status.HTTP_201_CREATED, response_model=OrderResponse)
async def new_order(
    request: NewOrderCommand,
    current_user: CurrentUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Place an order for the signed-in user.

    Raises:
        - 400 Bad Request: VALIDATION_ERROR
        - 422 Unprocessable Entity: malformed order payload
    """
    result = await CreateOrderUseCase(uow).execute(current_user.id, request)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/me/orders", status_code=status.HTTP_200_OK, response_model=OrdersListResponse)
async def my_orders(
    current_user: CurrentUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListOrdersUseCase(uow).execute(current_user.id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/orders/{order_id}", status_code=status.HTTP_200_OK, response_model=OrderDetailResponse
)
async def get_order_details(
    order_id: UUID,
    current_user: CurrentUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Order details with the name and email of its owner.

    Raises:
        - 403 Forbidden: FORBIDDEN (someone else's order)
        - 404 Not Found: ORDER_NOT_FOUND
    """
    result = await GetOrderUseCase(uow).execute(order_id, current_user.id, current_user.role)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
