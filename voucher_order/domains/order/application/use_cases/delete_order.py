"""
Delete Order Use Case
"""

import logging
from uuid import UUID

from voucher_order.core.domain import EntityNotFoundException
from voucher_order.domains.order.application.ports import IOrderRepository

logger = logging.getLogger(__name__)


class DeleteOrderUseCase:
    """Use Case: Delete an order and its items."""

    def __init__(self, order_repository: IOrderRepository):
        self.order_repository = order_repository

    async def execute(self, order_id: UUID) -> None:
        deleted = await self.order_repository.delete_by_id(order_id)
        if deleted == 0:
            raise EntityNotFoundException("Order", order_id)
        logger.info(f"Order deleted: {order_id}")


__all__ = ["DeleteOrderUseCase"]
