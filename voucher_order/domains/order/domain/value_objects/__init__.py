from .order_item import OrderItem
from .order_status import OrderStatus

__all__ = ["OrderItem", "OrderStatus"]
