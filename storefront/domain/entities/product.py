"""
Product Entity

Catalog item referenced by order line items.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from storefront.domain.base import utc_now


class Product(SQLModel, table=True):
    """
    Product entity - an item that can be ordered.

    Business Rules:
    - Stock is decremented when an order leaves Processing
    - Fulfillment never drives stock below zero
    """

    __tablename__ = "products"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=200, index=True)
    description: str = Field(default="")
    price: float = Field(default=0.0, ge=0)
    category: str = Field(default="", max_length=100, index=True)
    stock: int = Field(default=0)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
