"""
Database models package - Organized by responsibility
"""

from .base import Base, uuid_column, TimestampMixin
from .customers import CustomerModel
from .orders import OrderItemModel, OrderModel
from .vouchers import VoucherModel

__all__ = [
    # Base
    "Base",
    "uuid_column",
    "TimestampMixin",
    # Tables
    "CustomerModel",
    "VoucherModel",
    "OrderModel",
    "OrderItemModel",
]
