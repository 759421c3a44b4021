"""
Order Update Use Cases
"""

import logging
from dataclasses import dataclass
from uuid import UUID

from voucher_order.core.domain import EntityNotFoundException
from voucher_order.domains.order.application.ports import IOrderRepository
from voucher_order.domains.order.domain.entities.order import Order
from voucher_order.domains.order.domain.value_objects import OrderStatus

logger = logging.getLogger(__name__)


@dataclass
class ChangeOrderStatusRequest:
    order_id: UUID
    order_status: OrderStatus


class ChangeOrderStatusUseCase:
    """
    Use Case: Change Order Status

    Any status may be set from any other.
    """

    def __init__(self, order_repository: IOrderRepository):
        self.order_repository = order_repository

    async def execute(self, request: ChangeOrderStatusRequest) -> Order:
        order = await self.order_repository.find_by_id(request.order_id)
        if order is None:
            raise EntityNotFoundException("Order", request.order_id)

        previous = order.order_status
        order.change_status(request.order_status)
        await self.order_repository.update_by_id(order)
        logger.info(f"Order {order.id} status {previous.value} -> {order.order_status.value}")
        return order


__all__ = ["ChangeOrderStatusUseCase", "ChangeOrderStatusRequest"]
