"""
Compute Sales Use Case

Per-day order counts and revenue over a date range.
"""

from datetime import date, datetime, time, timedelta
from typing import List

from storefront.app.services.unit_of_work import UnitOfWork
from storefront.libs.result import Error, Result, Return
from .dtos import DailySales, SalesReport


def day_bounds(start_date: date, end_date: date) -> tuple[datetime, datetime]:
    """Widen a date range to [start 00:00:00.000, end 23:59:59.999] UTC"""
    start = datetime.combine(start_date, time.min)
    end = datetime.combine(end_date, time(23, 59, 59, 999000))
    return start, end


def dates_between(start_date: date, end_date: date) -> List[str]:
    """Every calendar date from start to end inclusive, as YYYY-MM-DD"""
    days = (end_date - start_date).days
    return [(start_date + timedelta(days=i)).isoformat() for i in range(days + 1)]


class ComputeSalesUseCase:
    """
    Use case for the admin sales report.

    Business Rules:
    - Orders are grouped by the UTC calendar day of created_at
    - Days without orders are reported with zero sales and zero orders
    - Totals are summed over the matched orders
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, start_date: date, end_date: date) -> Result[SalesReport]:
        """
        Execute compute sales use case.

        Args:
            start_date: First day of the report
            end_date: Last day of the report (inclusive)

        Returns:
            Result with SalesReport, or Error(VALIDATION_ERROR) if the range is reversed
        """
        if start_date > end_date:
            return Return.err(
                Error("VALIDATION_ERROR", "startDate must not be after endDate")
            )

        start, end = day_bounds(start_date, end_date)

        async with self.uow:
            rows = await self.uow.orders.sales_by_day(start, end)

        by_date = {}
        total_sales = 0.0
        total_num_orders = 0
        for row in rows:
            by_date[row.date] = row
            total_sales += row.total_sales
            total_num_orders += row.num_orders

        series = []
        for day in dates_between(start_date, end_date):
            row = by_date.get(day)
            if row is None:
                series.append(DailySales(date=day, sales=0, num_orders=0))
            else:
                series.append(
                    DailySales(date=day, sales=row.total_sales, num_orders=row.num_orders)
                )

        return Return.ok(
            SalesReport(
                total_sales=total_sales,
                total_num_orders=total_num_orders,
                sales=series,
            )
        )
