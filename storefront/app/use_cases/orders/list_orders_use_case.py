from typing import Optional
from uuid import UUID

from storefront.app.services.unit_of_work import UnitOfWork
from storefront.libs.result import Result, Return
from .dtos import OrderInfo, OrdersListResponse


class ListOrdersUseCase:
    """List the orders of one user, or every order when no user is given (admin)"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: Optional[UUID] = None) -> Result[OrdersListResponse]:
        async with self.uow:
            if user_id is None:
                orders = await self.uow.orders.list_all()
            else:
                orders = await self.uow.orders.list_by_user_id(user_id)

            return Return.ok(
                OrdersListResponse(orders=[OrderInfo.from_entity(o) for o in orders])
            )
