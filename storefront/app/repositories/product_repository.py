from abc import ABC, abstractmethod
from typing import Iterable, List, Optional
from uuid import UUID

from storefront.domain.entities import Product


class IProductRepository(ABC):
    """Product repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, product_id: UUID) -> Optional[Product]:
        """Get product by ID"""
        pass

    @abstractmethod
    async def get_many(self, product_ids: Iterable[UUID]) -> List[Product]:
        """Get every existing product among the given IDs"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Product]:
        """List the whole catalog"""
        pass

    @abstractmethod
    async def create(self, product: Product) -> Product:
        """Create a new product"""
        pass

    @abstractmethod
    async def decrement_stock(self, product_id: UUID, quantity: int) -> bool:
        """
        Atomically subtract quantity from a product's stock.

        Returns False, leaving stock untouched, when the product has
        fewer than quantity units left.
        """
        pass

    @abstractmethod
    async def delete_all(self) -> int:
        """Delete every product, returning how many were removed"""
        pass
