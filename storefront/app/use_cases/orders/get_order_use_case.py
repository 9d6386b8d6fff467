from uuid import UUID

from storefront.app.services.unit_of_work import UnitOfWork
from storefront.domain.entities import UserRole
from storefront.libs.result import Error, Result, Return
from .dtos import OrderDetailResponse, OrderInfo, OrderOwner


class GetOrderUseCase:
    """
    Use case for order details.

    Business Rules:
    - Customers only see their own orders; admins see every order
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, order_id: UUID, requesting_user_id: UUID, requesting_role: UserRole
    ) -> Result[OrderDetailResponse]:
        async with self.uow:
            order = await self.uow.orders.get_by_id(order_id)
            if order is None:
                return Return.err(Error("ORDER_NOT_FOUND", "No Order found with this ID"))

            if requesting_role != UserRole.admin and order.user_id != requesting_user_id:
                return Return.err(
                    Error("FORBIDDEN", "You are not allowed to view this order")
                )

            owner = await self.uow.users.get_by_id(order.user_id)
            return Return.ok(
                OrderDetailResponse(
                    order=OrderInfo.from_entity(order),
                    user=(
                        OrderOwner(id=str(owner.id), name=owner.name, email=owner.email)
                        if owner is not None
                        else None
                    ),
                )
            )
