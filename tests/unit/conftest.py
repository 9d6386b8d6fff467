import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock(return_value=None)
    uow.users.get_by_id = AsyncMock(return_value=None)
    uow.users.get_by_reset_token = AsyncMock(return_value=None)
    uow.users.list_all = AsyncMock(return_value=[])
    uow.users.create = AsyncMock(side_effect=lambda user: user)
    uow.users.update = AsyncMock(side_effect=lambda user: user)
    uow.users.delete = AsyncMock()

    uow.products = MagicMock()
    uow.products.get_by_id = AsyncMock(return_value=None)
    uow.products.get_many = AsyncMock(return_value=[])
    uow.products.decrement_stock = AsyncMock(return_value=True)

    uow.orders = MagicMock()
    uow.orders.get_by_id = AsyncMock(return_value=None)
    uow.orders.create = AsyncMock(side_effect=lambda order: order)
    uow.orders.update = AsyncMock(side_effect=lambda order: order)
    uow.orders.sales_by_day = AsyncMock(return_value=[])
    uow.orders.delete_by_user_id = AsyncMock(return_value=0)

    return uow
