from typing import List

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DailySales(BaseModel):
    """Revenue and order count of one calendar day (YYYY-MM-DD, UTC)"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    date: str
    sales: float
    num_orders: int


class SalesReport(BaseModel):
    """Gap-filled per-day series plus totals over the whole range"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_sales: float
    total_num_orders: int
    sales: List[DailySales]
