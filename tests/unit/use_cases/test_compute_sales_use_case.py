"""
Unit tests for ComputeSalesUseCase
"""
from datetime import date, datetime

import pytest

from storefront.app.repositories.order_repository import DailySalesRow
from storefront.app.use_cases.sales import ComputeSalesUseCase
from storefront.app.use_cases.sales.compute_sales_use_case import dates_between, day_bounds


def test_day_bounds_cover_whole_days():
    start, end = day_bounds(date(2024, 1, 1), date(2024, 1, 3))

    assert start == datetime(2024, 1, 1, 0, 0, 0)
    assert end == datetime(2024, 1, 3, 23, 59, 59, 999000)


def test_dates_between_is_inclusive():
    assert dates_between(date(2024, 2, 28), date(2024, 3, 1)) == [
        "2024-02-28",
        "2024-02-29",
        "2024-03-01",
    ]
    assert dates_between(date(2024, 1, 1), date(2024, 1, 1)) == ["2024-01-01"]


@pytest.mark.asyncio
async def test_days_without_orders_are_zero_filled(mock_uow):
    mock_uow.orders.sales_by_day.return_value = [
        DailySalesRow(date="2024-01-01", total_sales=100.0, num_orders=2),
        DailySalesRow(date="2024-01-03", total_sales=50.0, num_orders=1),
    ]

    result = await ComputeSalesUseCase(mock_uow).execute(date(2024, 1, 1), date(2024, 1, 3))

    assert result.is_ok()
    report = result.value
    assert report.total_sales == 150.0
    assert report.total_num_orders == 3
    assert [(d.date, d.sales, d.num_orders) for d in report.sales] == [
        ("2024-01-01", 100.0, 2),
        ("2024-01-02", 0, 0),
        ("2024-01-03", 50.0, 1),
    ]

    mock_uow.orders.sales_by_day.assert_called_once_with(
        datetime(2024, 1, 1, 0, 0, 0), datetime(2024, 1, 3, 23, 59, 59, 999000)
    )


@pytest.mark.asyncio
async def test_one_order_on_first_day_two_on_last(mock_uow):
    mock_uow.orders.sales_by_day.return_value = [
        DailySalesRow(date="2024-01-01", total_sales=100.0, num_orders=1),
        DailySalesRow(date="2024-01-03", total_sales=50.0, num_orders=2),
    ]

    result = await ComputeSalesUseCase(mock_uow).execute(date(2024, 1, 1), date(2024, 1, 3))

    report = result.value
    assert report.total_sales == 150.0
    assert report.total_num_orders == 3
    assert [(d.date, d.sales, d.num_orders) for d in report.sales] == [
        ("2024-01-01", 100.0, 1),
        ("2024-01-02", 0, 0),
        ("2024-01-03", 50.0, 2),
    ]


@pytest.mark.asyncio
async def test_empty_range_reports_zero(mock_uow):
    result = await ComputeSalesUseCase(mock_uow).execute(date(2024, 5, 1), date(2024, 5, 2))

    assert result.is_ok()
    assert result.value.total_sales == 0
    assert result.value.total_num_orders == 0
    assert len(result.value.sales) == 2


@pytest.mark.asyncio
async def test_reversed_range(mock_uow):
    result = await ComputeSalesUseCase(mock_uow).execute(date(2024, 1, 3), date(2024, 1, 1))

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"
    mock_uow.orders.sales_by_day.assert_not_called()


@pytest.mark.asyncio
async def test_report_serializes_with_camel_case_keys(mock_uow):
    mock_uow.orders.sales_by_day.return_value = [
        DailySalesRow(date="2024-01-01", total_sales=100.0, num_orders=1),
    ]

    result = await ComputeSalesUseCase(mock_uow).execute(date(2024, 1, 1), date(2024, 1, 1))

    assert result.value.model_dump(by_alias=True) == {
        "totalSales": 100.0,
        "totalNumOrders": 1,
        "sales": [{"date": "2024-01-01", "sales": 100.0, "numOrders": 1}],
    }
