from typing import Iterable, List, Optional
from uuid import UUID

from sqlalchemy import delete, update
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from storefront.app.repositories.product_repository import IProductRepository
from storefront.domain.entities import Product


class ProductRepository(IProductRepository):
    """Product repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, product_id: UUID) -> Optional[Product]:
        """Get product by ID"""
        stmt = select(Product).where(Product.id == product_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_many(self, product_ids: Iterable[UUID]) -> List[Product]:
        """Get every existing product among the given IDs"""
        ids = list(product_ids)
        if not ids:
            return []
        stmt = select(Product).where(col(Product.id).in_(ids))
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_all(self) -> List[Product]:
        """List the whole catalog"""
        stmt = select(Product).order_by(Product.name)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, product: Product) -> Product:
        """Create a new product"""
        self.session.add(product)
        await self.session.flush()
        await self.session.refresh(product)
        return product

    async def decrement_stock(self, product_id: UUID, quantity: int) -> bool:
        """Single conditional UPDATE, so concurrent orders cannot lose decrements"""
        stmt = (
            update(Product)
            .where(col(Product.id) == product_id, col(Product.stock) >= quantity)
            .values(stock=col(Product.stock) - quantity)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1

    async def delete_all(self) -> int:
        """Delete every product, returning how many were removed"""
        result = await self.session.execute(delete(Product))
        await self.session.flush()
        return result.rowcount
