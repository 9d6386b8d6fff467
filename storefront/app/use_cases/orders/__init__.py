"""
Order Use Cases

All order-related business logic.
"""

from .create_order_use_case import CreateOrderUseCase
from .list_orders_use_case import ListOrdersUseCase
from .get_order_use_case import GetOrderUseCase
from .update_order_use_case import UpdateOrderUseCase
from .delete_order_use_case import DeleteOrderUseCase
from .dtos import (
    NewOrderCommand,
    OrderDetailResponse,
    OrderInfo,
    OrderItemInfo,
    OrderOwner,
    OrderResponse,
    OrdersListResponse,
    PaymentInfo,
    ShippingInfo,
    UpdateOrderResponse,
)

__all__ = [
    # Use Cases
    "CreateOrderUseCase",
    "ListOrdersUseCase",
    "GetOrderUseCase",
    "UpdateOrderUseCase",
    "DeleteOrderUseCase",
    # DTOs - Commands
    "NewOrderCommand",
    # DTOs - Responses
    "OrderResponse",
    "OrderDetailResponse",
    "OrdersListResponse",
    "UpdateOrderResponse",
    # DTOs - Nested Models
    "OrderInfo",
    "OrderItemInfo",
    "OrderOwner",
    "ShippingInfo",
    "PaymentInfo",
]
