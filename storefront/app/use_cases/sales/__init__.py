"""
Sales Reporting Use Cases
"""

from .compute_sales_use_case import ComputeSalesUseCase, dates_between, day_bounds
from .dtos import DailySales, SalesReport

__all__ = [
    "ComputeSalesUseCase",
    "DailySales",
    "SalesReport",
    "dates_between",
    "day_bounds",
]
