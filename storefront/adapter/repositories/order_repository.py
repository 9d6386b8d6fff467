from datetime import date, datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, func
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from storefront.app.repositories.order_repository import DailySalesRow, IOrderRepository
from storefront.domain.entities import Order


class OrderRepository(IOrderRepository):
    """Order repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, order_id: UUID) -> Optional[Order]:
        """Get order by ID"""
        stmt = select(Order).where(Order.id == order_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_by_user_id(self, user_id: UUID) -> List[Order]:
        """List orders placed by a user, newest first"""
        stmt = (
            select(Order)
            .where(Order.user_id == user_id)
            .order_by(col(Order.created_at).desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_all(self) -> List[Order]:
        """List every order, newest first"""
        stmt = select(Order).order_by(col(Order.created_at).desc())
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, order: Order) -> Order:
        """Create a new order"""
        self.session.add(order)
        await self.session.flush()
        await self.session.refresh(order)
        return order

    async def update(self, order: Order) -> Order:
        """Update existing order"""
        self.session.add(order)
        await self.session.flush()
        await self.session.refresh(order)
        return order

    async def delete(self, order: Order) -> None:
        """Delete an order"""
        await self.session.delete(order)
        await self.session.flush()

    async def delete_by_user_id(self, user_id: UUID) -> int:
        """Delete every order placed by a user, returning how many were removed"""
        stmt = delete(Order).where(col(Order.user_id) == user_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def sales_by_day(self, start: datetime, end: datetime) -> List[DailySalesRow]:
        """Sum total_amount and count orders per creation day within [start, end]"""
        day = func.date(col(Order.created_at))
        stmt = (
            select(
                day.label("day"),
                func.sum(col(Order.total_amount)).label("total_sales"),
                func.count(col(Order.id)).label("num_orders"),
            )
            .where(col(Order.created_at) >= start, col(Order.created_at) <= end)
            .group_by(day)
            .order_by(day)
        )
        result = await self.session.execute(stmt)
        return [
            DailySalesRow(
                date=d.isoformat() if isinstance(d, date) else str(d),
                total_sales=float(total or 0),
                num_orders=int(count),
            )
            for d, total, count in result.all()
        ]
