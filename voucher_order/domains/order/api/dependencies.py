"""
Order API Dependencies

FastAPI dependencies for the order domain.
"""

from voucher_order.api.dependencies import DbSession
from voucher_order.core.container import get_container
from voucher_order.domains.order.application.use_cases import (
    ChangeOrderStatusUseCase,
    CreateOrderUseCase,
    DeleteOrderUseCase,
    GetCustomerOrdersUseCase,
    GetOrderUseCase,
)


def get_create_order_use_case(db: DbSession) -> CreateOrderUseCase:
    """Get CreateOrderUseCase instance with database session."""
    return get_container().create_create_order_use_case(db)


def get_get_order_use_case(db: DbSession) -> GetOrderUseCase:
    """Get GetOrderUseCase instance with database session."""
    return get_container().create_get_order_use_case(db)


def get_customer_orders_use_case(db: DbSession) -> GetCustomerOrdersUseCase:
    """Get GetCustomerOrdersUseCase instance with database session."""
    return get_container().create_get_customer_orders_use_case(db)


def get_change_order_status_use_case(db: DbSession) -> ChangeOrderStatusUseCase:
    """Get ChangeOrderStatusUseCase instance with database session."""
    return get_container().create_change_order_status_use_case(db)


def get_delete_order_use_case(db: DbSession) -> DeleteOrderUseCase:
    """Get DeleteOrderUseCase instance with database session."""
    return get_container().create_delete_order_use_case(db)


__all__ = [
    "get_create_order_use_case",
    "get_get_order_use_case",
    "get_customer_orders_use_case",
    "get_change_order_status_use_case",
    "get_delete_order_use_case",
]
