"""
Order Infrastructure Repositories
"""

from .order_repository import SQLOrderRepository, item_from_row, order_from_row
from .order_sql import OrderSql

__all__ = [
    "SQLOrderRepository",
    "OrderSql",
    "item_from_row",
    "order_from_row",
]
