"""
Order Domain Layer

- Entities: Order
- Value Objects: OrderItem, OrderStatus
"""

from .entities import Order
from .value_objects import OrderItem, OrderStatus

__all__ = ["Order", "OrderItem", "OrderStatus"]
