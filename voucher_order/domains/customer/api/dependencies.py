"""
Customer API Dependencies

FastAPI dependencies for the customer domain.
"""

from voucher_order.api.dependencies import DbSession
from voucher_order.core.container import get_container
from voucher_order.domains.customer.application.use_cases import (
    CreateCustomerUseCase,
    DeleteCustomerUseCase,
    FindBlacklistCustomersUseCase,
    GetCustomerUseCase,
    ListCustomersUseCase,
    RecordCustomerLoginUseCase,
    UpdateCustomerUseCase,
)


def get_create_customer_use_case(db: DbSession) -> CreateCustomerUseCase:
    return get_container().create_create_customer_use_case(db)


def get_get_customer_use_case(db: DbSession) -> GetCustomerUseCase:
    return get_container().create_get_customer_use_case(db)


def get_list_customers_use_case(db: DbSession) -> ListCustomersUseCase:
    return get_container().create_list_customers_use_case(db)


def get_update_customer_use_case(db: DbSession) -> UpdateCustomerUseCase:
    return get_container().create_update_customer_use_case(db)


def get_delete_customer_use_case(db: DbSession) -> DeleteCustomerUseCase:
    return get_container().create_delete_customer_use_case(db)


def get_find_blacklist_customers_use_case(db: DbSession) -> FindBlacklistCustomersUseCase:
    return get_container().create_find_blacklist_customers_use_case(db)


def get_record_customer_login_use_case(db: DbSession) -> RecordCustomerLoginUseCase:
    return get_container().create_record_customer_login_use_case(db)


__all__ = [
    "get_create_customer_use_case",
    "get_get_customer_use_case",
    "get_list_customers_use_case",
    "get_update_customer_use_case",
    "get_delete_customer_use_case",
    "get_find_blacklist_customers_use_case",
    "get_record_customer_login_use_case",
]
