"""
Customer Infrastructure Repositories
"""

from .customer_repository import SQLCustomerRepository, customer_from_row
from .customer_sql import CustomerSql

__all__ = [
    "SQLCustomerRepository",
    "CustomerSql",
    "customer_from_row",
]
