"""
Order Application Ports
"""

from typing import Protocol, runtime_checkable
from uuid import UUID

from voucher_order.domains.order.domain.entities.order import Order


@runtime_checkable
class IOrderRepository(Protocol):
    """
    Interface for order repository.

    Orders are read back with their items and voucher.
    """

    async def save(self, order: Order) -> UUID:
        """Insert an order and its items"""
        ...

    async def find_by_id(self, order_id: UUID) -> Order | None:
        """Get order by ID"""
        ...

    async def find_all(self) -> list[Order]:
        """Get all orders"""
        ...

    async def find_by_customer_id(self, customer_id: UUID) -> list[Order]:
        """Get orders of a customer"""
        ...

    async def update_by_id(self, order: Order) -> int:
        """Update status and voucher; raises when nothing was updated"""
        ...

    async def update_customer_id(self, order_id: UUID, customer_id: UUID) -> int:
        """Move an order to another customer"""
        ...

    async def delete_by_id(self, order_id: UUID) -> int:
        """Delete one order"""
        ...

    async def delete_all(self) -> int:
        """Delete every order"""
        ...

    async def delete_by_customer_id(self, customer_id: UUID) -> int:
        """Delete orders of a customer"""
        ...


__all__ = ["IOrderRepository"]
