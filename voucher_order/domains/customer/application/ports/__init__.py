"""
Customer Application Ports

Interface definitions (ports) for the customer domain.
"""

from typing import Protocol, runtime_checkable
from uuid import UUID

from voucher_order.domains.customer.domain.entities.customer import Customer
from voucher_order.domains.customer.domain.value_objects.customer_type import CustomerType


@runtime_checkable
class ICustomerRepository(Protocol):
    """
    Interface for customer repository.

    Write operations return the number of affected rows.
    """

    async def save(self, customer: Customer) -> UUID:
        """Insert a customer"""
        ...

    async def find_by_id(self, customer_id: UUID) -> Customer | None:
        """Get customer by ID"""
        ...

    async def find_all(self) -> list[Customer]:
        """Get all customers"""
        ...

    async def find_by_name(self, name: str) -> list[Customer]:
        """Get customers with an exact name"""
        ...

    async def find_by_email(self, email: str) -> Customer | None:
        """Get customer by email"""
        ...

    async def find_by_customer_type(self, customer_type: CustomerType) -> list[Customer]:
        """Get customers of a type"""
        ...

    async def find_by_voucher_id(self, voucher_id: UUID) -> Customer | None:
        """Get the owner of a voucher"""
        ...

    async def update_by_id(self, customer: Customer) -> int:
        """Update name, email and type; raises when nothing was updated"""
        ...

    async def update_last_login(self, customer_id: UUID) -> int:
        """Stamp the last login time"""
        ...

    async def delete_by_id(self, customer_id: UUID) -> int:
        """Delete one customer"""
        ...

    async def delete_all(self) -> int:
        """Delete every customer"""
        ...

    async def count(self) -> int:
        """Number of customers"""
        ...


__all__ = ["ICustomerRepository"]
