"""
Customer Use Cases
"""

from .create_customer import CreateCustomerUseCase
from .delete_customer import DeleteCustomerUseCase
from .get_customers import (
    FindBlacklistCustomersUseCase,
    GetCustomerUseCase,
    GetVoucherOwnerUseCase,
    ListCustomersUseCase,
)
from .update_customer import RecordCustomerLoginUseCase, UpdateCustomerUseCase

__all__ = [
    "CreateCustomerUseCase",
    "GetCustomerUseCase",
    "ListCustomersUseCase",
    "FindBlacklistCustomersUseCase",
    "GetVoucherOwnerUseCase",
    "UpdateCustomerUseCase",
    "RecordCustomerLoginUseCase",
    "DeleteCustomerUseCase",
]
