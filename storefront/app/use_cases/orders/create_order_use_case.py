import logging
from uuid import UUID

from storefront.app.services.unit_of_work import UnitOfWork
from storefront.domain.entities import Order
from storefront.libs.result import Error, Result, Return
from .dtos import NewOrderCommand, OrderInfo, OrderResponse

logger = logging.getLogger(__name__)


class CreateOrderUseCase:
    """
    Use case for placing an order.

    Business Rules:
    - An order has at least one line item
    - Line items, shipping and payment info are embedded in the order
    - New orders start in Processing
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, command: NewOrderCommand) -> Result[OrderResponse]:
        if not command.order_items:
            return Return.err(
                Error("VALIDATION_ERROR", "An order needs at least one item")
            )

        async with self.uow:
            order = Order(
                user_id=user_id,
                order_items=[item.model_dump(mode="json") for item in command.order_items],
                shipping_info=command.shipping_info.model_dump(mode="json"),
                items_price=command.items_price,
                tax_amount=command.tax_amount,
                shipping_amount=command.shipping_amount,
                total_amount=command.total_amount,
                payment_method=command.payment_method,
                payment_info=(
                    command.payment_info.model_dump(mode="json")
                    if command.payment_info is not None
                    else None
                ),
            )
            order = await self.uow.orders.create(order)

            await self.uow.commit()

            logger.info(f"User {user_id} placed order {order.id}")
            return Return.ok(OrderResponse(order=OrderInfo.from_entity(order)))
