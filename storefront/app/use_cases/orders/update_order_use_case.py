"""
Update Order Use Case

Advances an order through fulfillment and takes the ordered units out of stock.
"""

import logging
from typing import Any
from uuid import UUID

from storefront.app.services.unit_of_work import UnitOfWork
from storefront.domain.base import utc_now
from storefront.domain.entities import OrderStatus
from storefront.libs.result import Error, Result, Return
from .dtos import OrderInfo, UpdateOrderResponse

logger = logging.getLogger(__name__)


class UpdateOrderUseCase:
    """
    Use case for changing an order's status (admin only).

    Business Rules:
    - A Delivered order can never be updated again
    - Status only moves forward: Processing -> Shipped -> Delivered
    - Stock is taken when the order leaves Processing, once per order
    - Every referenced product must exist before any stock changes
    - Stock decrements are atomic and never drive stock below zero
    - Stock, status and delivered_at are committed together or not at all
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, order_id: UUID, status: Any) -> Result[UpdateOrderResponse]:
        """
        Execute update order use case.

        Args:
            order_id: Order to update
            status: Target status name (Processing, Shipped, Delivered)

        Returns:
            Result with the updated order, or Error
            (ORDER_NOT_FOUND, ORDER_ALREADY_DELIVERED, VALIDATION_ERROR,
            PRODUCT_NOT_FOUND, INSUFFICIENT_STOCK)
        """
        async with self.uow:
            order = await self.uow.orders.get_by_id(order_id)
            if order is None:
                return Return.err(Error("ORDER_NOT_FOUND", "No Order found with this ID"))

            if order.order_status == OrderStatus.delivered:
                return Return.err(
                    Error(
                        "ORDER_ALREADY_DELIVERED",
                        "You have already delivered this order",
                    )
                )

            try:
                new_status = OrderStatus(status)
            except ValueError:
                return Return.err(
                    Error("VALIDATION_ERROR", f"Invalid order status: {status!r}")
                )

            if new_status.rank <= order.order_status.rank:
                return Return.err(
                    Error(
                        "VALIDATION_ERROR",
                        f"Order cannot move from {order.order_status.value} to {new_status.value}",
                    )
                )

            if order.order_status == OrderStatus.processing:
                stock_result = await self._take_stock(order.quantities_by_product())
                if stock_result.is_err():
                    await self.uow.rollback()
                    return Return.err(stock_result.error)

            order.order_status = new_status
            if new_status == OrderStatus.delivered:
                order.delivered_at = utc_now()
            order = await self.uow.orders.update(order)

            await self.uow.commit()

            logger.info(f"Order {order_id} moved to {new_status.value}")
            return Return.ok(UpdateOrderResponse(order=OrderInfo.from_entity(order)))

    async def _take_stock(self, quantities: dict) -> Result[None]:
        products = await self.uow.products.get_many(quantities.keys())
        found_ids = {p.id for p in products}
        if found_ids != set(quantities):
            return Return.err(
                Error("PRODUCT_NOT_FOUND", "No Product found with one or more IDs.")
            )

        for product_id, quantity in quantities.items():
            if not await self.uow.products.decrement_stock(product_id, quantity):
                return Return.err(
                    Error(
                        "INSUFFICIENT_STOCK",
                        f"Not enough stock for product {product_id}",
                    )
                )

        return Return.ok(None)
