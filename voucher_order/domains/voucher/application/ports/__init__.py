"""
Voucher Application Ports

Interface definitions (ports) for the voucher domain.
Uses Protocol for structural typing.
"""

from datetime import date
from typing import Protocol, runtime_checkable
from uuid import UUID

from voucher_order.domains.voucher.domain.entities.voucher import Voucher
from voucher_order.domains.voucher.domain.value_objects.voucher_type import VoucherType


@runtime_checkable
class IVoucherRepository(Protocol):
    """
    Interface for voucher repository.

    Write operations return the number of affected rows.
    """

    async def save(self, voucher: Voucher) -> UUID:
        """Insert a voucher"""
        ...

    async def find_by_id(self, voucher_id: UUID) -> Voucher | None:
        """Get voucher by ID"""
        ...

    async def find_all(self) -> list[Voucher]:
        """Get all vouchers"""
        ...

    async def find_by_customer_id(self, customer_id: UUID) -> list[Voucher]:
        """Get vouchers owned by a customer"""
        ...

    async def find_by_voucher_type_and_date(self, voucher_type: VoucherType, created_on: date) -> list[Voucher]:
        """Get vouchers of a type created on a day"""
        ...

    async def update_by_id(self, voucher: Voucher) -> int:
        """Update type and discount value; raises when nothing was updated"""
        ...

    async def update_customer_id(self, voucher_id: UUID, customer_id: UUID | None) -> int:
        """Change the owning customer"""
        ...

    async def delete_by_id(self, voucher_id: UUID) -> int:
        """Delete one voucher"""
        ...

    async def delete_all(self) -> int:
        """Delete every voucher"""
        ...

    async def delete_by_customer_id(self, customer_id: UUID) -> int:
        """Delete vouchers owned by a customer"""
        ...


__all__ = ["IVoucherRepository"]
