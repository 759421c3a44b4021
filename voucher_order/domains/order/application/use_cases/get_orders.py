"""
Order Query Use Cases
"""

from uuid import UUID

from voucher_order.core.domain import EntityNotFoundException
from voucher_order.domains.order.application.ports import IOrderRepository
from voucher_order.domains.order.domain.entities.order import Order


class GetOrderUseCase:
    """Use Case: Get Order by ID, with items and voucher."""

    def __init__(self, order_repository: IOrderRepository):
        self.order_repository = order_repository

    async def execute(self, order_id: UUID) -> Order:
        order = await self.order_repository.find_by_id(order_id)
        if order is None:
            raise EntityNotFoundException("Order", order_id)
        return order


class GetCustomerOrdersUseCase:
    """Use Case: Orders placed by a customer, oldest first."""

    def __init__(self, order_repository: IOrderRepository):
        self.order_repository = order_repository

    async def execute(self, customer_id: UUID) -> list[Order]:
        return await self.order_repository.find_by_customer_id(customer_id)


__all__ = ["GetOrderUseCase", "GetCustomerOrdersUseCase"]
