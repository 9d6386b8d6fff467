from abc import ABC, abstractmethod

from storefront.app.repositories.order_repository import IOrderRepository
from storefront.app.repositories.product_repository import IProductRepository
from storefront.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    products: IProductRepository
    orders: IOrderRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
