"""
Unit tests for placing and viewing orders
"""
from uuid import uuid4

import pytest

from storefront.app.use_cases.orders.create_order_use_case import CreateOrderUseCase
from storefront.app.use_cases.orders.dtos import NewOrderCommand
from storefront.app.use_cases.orders.get_order_use_case import GetOrderUseCase
from storefront.domain.entities import Order, User, UserRole


def new_order_command(items):
    return NewOrderCommand(
        order_items=items,
        shipping_info={
            "address": "1 Main St",
            "city": "Springfield",
            "phone_no": "5550100",
            "zip_code": "12345",
            "country": "US",
        },
        items_price=20.0,
        tax_amount=2.0,
        shipping_amount=5.0,
        total_amount=27.0,
        payment_method="COD",
    )


@pytest.mark.asyncio
async def test_create_order_starts_processing(mock_uow):
    user_id = uuid4()
    product_id = uuid4()
    command = new_order_command(
        [{"product": str(product_id), "name": "Widget", "quantity": 2, "price": 10.0}]
    )

    result = await CreateOrderUseCase(mock_uow).execute(user_id, command)

    assert result.is_ok()
    order = result.value.order
    assert order.user_id == str(user_id)
    assert order.order_status == "Processing"
    assert order.order_items[0].product == product_id
    assert order.total_amount == 27.0
    mock_uow.orders.create.assert_called_once()
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_create_order_without_items(mock_uow):
    result = await CreateOrderUseCase(mock_uow).execute(uuid4(), new_order_command([]))

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"
    mock_uow.orders.create.assert_not_called()


@pytest.fixture
def placed_order():
    owner = User(name="Jane", email="jane@example.com", password_hash="x")
    order = Order(
        user_id=owner.id,
        order_items=[{"product": str(uuid4()), "name": "Widget", "quantity": 1, "price": 5.0}],
        shipping_info={
            "address": "1 Main St",
            "city": "Springfield",
            "phone_no": "5550100",
            "zip_code": "12345",
            "country": "US",
        },
        total_amount=5.0,
    )
    return owner, order


@pytest.mark.asyncio
async def test_owner_sees_order_with_user_details(mock_uow, placed_order):
    owner, order = placed_order
    mock_uow.orders.get_by_id.return_value = order
    mock_uow.users.get_by_id.return_value = owner

    result = await GetOrderUseCase(mock_uow).execute(order.id, owner.id, UserRole.user)

    assert result.is_ok()
    assert result.value.order.id == str(order.id)
    assert result.value.user.email == "jane@example.com"


@pytest.mark.asyncio
async def test_other_customer_is_forbidden(mock_uow, placed_order):
    _, order = placed_order
    mock_uow.orders.get_by_id.return_value = order

    result = await GetOrderUseCase(mock_uow).execute(order.id, uuid4(), UserRole.user)

    assert result.is_err()
    assert result.error.code == "FORBIDDEN"


@pytest.mark.asyncio
async def test_admin_sees_any_order(mock_uow, placed_order):
    owner, order = placed_order
    mock_uow.orders.get_by_id.return_value = order
    mock_uow.users.get_by_id.return_value = owner

    result = await GetOrderUseCase(mock_uow).execute(order.id, uuid4(), UserRole.admin)

    assert result.is_ok()


@pytest.mark.asyncio
async def test_order_not_found(mock_uow):
    result = await GetOrderUseCase(mock_uow).execute(uuid4(), uuid4(), UserRole.admin)

    assert result.is_err()
    assert result.error.code == "ORDER_NOT_FOUND"
