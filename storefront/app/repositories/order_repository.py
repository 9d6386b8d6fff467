from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, NamedTuple, Optional
from uuid import UUID

from storefront.domain.entities import Order


class DailySalesRow(NamedTuple):
    """Orders created on one calendar day, as grouped by the store"""

    date: str  # YYYY-MM-DD
    total_sales: float
    num_orders: int


class IOrderRepository(ABC):
    """Order repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, order_id: UUID) -> Optional[Order]:
        """Get order by ID"""
        pass

    @abstractmethod
    async def list_by_user_id(self, user_id: UUID) -> List[Order]:
        """List orders placed by a user"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Order]:
        """List every order"""
        pass

    @abstractmethod
    async def create(self, order: Order) -> Order:
        """Create a new order"""
        pass

    @abstractmethod
    async def update(self, order: Order) -> Order:
        """Update existing order"""
        pass

    @abstractmethod
    async def delete(self, order: Order) -> None:
        """Delete an order"""
        pass

    @abstractmethod
    async def delete_by_user_id(self, user_id: UUID) -> int:
        """Delete every order placed by a user, returning how many were removed"""
        pass

    @abstractmethod
    async def sales_by_day(self, start: datetime, end: datetime) -> List[DailySalesRow]:
        """Sum total_amount and count orders per creation day within [start, end]"""
        pass
