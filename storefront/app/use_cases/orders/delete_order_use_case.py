from uuid import UUID

from storefront.app.services.unit_of_work import UnitOfWork
from storefront.app.use_cases.users.dtos import SuccessResponse
from storefront.libs.result import Error, Result, Return


class DeleteOrderUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, order_id: UUID) -> Result[SuccessResponse]:
        async with self.uow:
            order = await self.uow.orders.get_by_id(order_id)
            if order is None:
                return Return.err(Error("ORDER_NOT_FOUND", "No Order found with this ID"))

            await self.uow.orders.delete(order)
            await self.uow.commit()

            return Return.ok(SuccessResponse())
