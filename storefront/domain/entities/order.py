"""
Order Entity

A purchase with its line items, shipping and payment info embedded.
"""

from datetime import datetime
from typing import Any, Optional
from uuid import UUID, uuid4

from sqlalchemy import JSON
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from storefront.domain.base import utc_now
from .enums import OrderStatus, PaymentMethod


class Order(SQLModel, table=True):
    """
    Order entity - owned by the user who placed it.

    Business Rules:
    - Line items are embedded; each references a product id and a quantity
    - Status only moves forward: Processing -> Shipped -> Delivered
    - A Delivered order can no longer be updated
    - delivered_at is set when the order becomes Delivered
    """

    __tablename__ = "orders"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID = Field(foreign_key="users.id", index=True)

    order_items: list[dict[str, Any]] = Field(default_factory=list, sa_column=Column(JSON))
    shipping_info: dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON))

    items_price: float = Field(default=0.0)
    tax_amount: float = Field(default=0.0)
    shipping_amount: float = Field(default=0.0)
    total_amount: float = Field(default=0.0)

    payment_method: PaymentMethod = Field(default=PaymentMethod.cod)
    payment_info: Optional[dict[str, Any]] = Field(default=None, sa_column=Column(JSON))

    order_status: OrderStatus = Field(default=OrderStatus.processing)
    delivered_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_order_created_at", "created_at"),)

    def quantities_by_product(self) -> dict[UUID, int]:
        """Total ordered quantity per product id across all line items"""
        quantities: dict[UUID, int] = {}
        for item in self.order_items:
            product_id = UUID(str(item["product"]))
            quantities[product_id] = quantities.get(product_id, 0) + int(item["quantity"])
        return quantities
