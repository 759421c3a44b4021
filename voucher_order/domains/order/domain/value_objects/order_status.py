"""
Order Status Value Object
"""

from voucher_order.core.domain import StatusEnum


class OrderStatus(StatusEnum):
    """Lifecycle labels of an order. Any status may follow any other."""

    ACCEPTED = "ACCEPTED"
    PAYMENT_REQUIRED = "PAYMENT_REQUIRED"
    PAYMENT_CONFIRMED = "PAYMENT_CONFIRMED"
    READY_FOR_DELIVERY = "READY_FOR_DELIVERY"
    SHIPPED = "SHIPPED"
    SETTLED = "SETTLED"
    CANCELLED = "CANCELLED"
