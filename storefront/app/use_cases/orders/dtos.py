"""
Order Use Case DTOs (Data Transfer Objects)

Command/Response pattern for the order use cases.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from storefront.domain.entities import Order, PaymentMethod


class OrderItemInfo(BaseModel):
    """One line item: a product and how many of it"""

    product: UUID
    name: str
    quantity: int = Field(..., ge=1)
    price: float = Field(..., ge=0)
    image: Optional[str] = None


class ShippingInfo(BaseModel):
    address: str
    city: str
    phone_no: str
    zip_code: str
    country: str


class PaymentInfo(BaseModel):
    id: Optional[str] = None
    status: Optional[str] = None


class NewOrderCommand(BaseModel):
    """Checkout intent of the signed-in user"""

    order_items: List[OrderItemInfo]
    shipping_info: ShippingInfo
    items_price: float = Field(..., ge=0)
    tax_amount: float = Field(..., ge=0)
    shipping_amount: float = Field(..., ge=0)
    total_amount: float = Field(..., ge=0)
    payment_method: PaymentMethod
    payment_info: Optional[PaymentInfo] = None


class OrderInfo(BaseModel):
    """Order as exposed by the API"""

    id: str
    user_id: str
    order_items: List[OrderItemInfo]
    shipping_info: ShippingInfo
    items_price: float
    tax_amount: float
    shipping_amount: float
    total_amount: float
    payment_method: str
    payment_info: Optional[PaymentInfo] = None
    order_status: str
    delivered_at: Optional[datetime] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, order: Order) -> "OrderInfo":
        return cls(
            id=str(order.id),
            user_id=str(order.user_id),
            order_items=[OrderItemInfo(**item) for item in order.order_items],
            shipping_info=ShippingInfo(**order.shipping_info),
            items_price=order.items_price,
            tax_amount=order.tax_amount,
            shipping_amount=order.shipping_amount,
            total_amount=order.total_amount,
            payment_method=order.payment_method.value,
            payment_info=PaymentInfo(**order.payment_info) if order.payment_info else None,
            order_status=order.order_status.value,
            delivered_at=order.delivered_at,
            created_at=order.created_at,
        )


class OrderOwner(BaseModel):
    id: str
    name: str
    email: str


class OrderResponse(BaseModel):
    order: OrderInfo


class OrderDetailResponse(BaseModel):
    """Order together with the name and email of the user who placed it"""

    order: OrderInfo
    user: Optional[OrderOwner] = None


class OrdersListResponse(BaseModel):
    orders: List[OrderInfo]


class UpdateOrderResponse(BaseModel):
    success: bool = True
    order: OrderInfo
