"""
Order Use Cases
"""

from .create_order import CreateOrderRequest, CreateOrderUseCase
from .delete_order import DeleteOrderUseCase
from .get_orders import GetCustomerOrdersUseCase, GetOrderUseCase
from .update_order import ChangeOrderStatusRequest, ChangeOrderStatusUseCase

__all__ = [
    "CreateOrderUseCase",
    "CreateOrderRequest",
    "GetOrderUseCase",
    "GetCustomerOrdersUseCase",
    "ChangeOrderStatusUseCase",
    "ChangeOrderStatusRequest",
    "DeleteOrderUseCase",
]
