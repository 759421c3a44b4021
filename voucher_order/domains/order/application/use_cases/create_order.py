"""
Create Order Use Case
"""

import logging
from dataclasses import dataclass, field
from uuid import UUID

from voucher_order.core.domain import EntityNotFoundException
from voucher_order.domains.order.application.ports import IOrderRepository
from voucher_order.domains.order.domain.entities.order import Order
from voucher_order.domains.order.domain.value_objects import OrderItem
from voucher_order.domains.voucher.application.ports import IVoucherRepository

logger = logging.getLogger(__name__)


@dataclass
class CreateOrderRequest:
    """Request for placing an order, optionally with a voucher."""

    customer_id: UUID
    order_items: list[OrderItem] = field(default_factory=list)
    voucher_id: UUID | None = None


class CreateOrderUseCase:
    """
    Use Case: Create Order

    Responsibilities:
    - Resolve the voucher when one is referenced
    - Build the order in ACCEPTED status
    - Persist the order with its items
    """

    def __init__(
        self,
        order_repository: IOrderRepository,
        voucher_repository: IVoucherRepository,
    ):
        self.order_repository = order_repository
        self.voucher_repository = voucher_repository

    async def execute(self, request: CreateOrderRequest) -> Order:
        """
        Raises:
            EntityNotFoundException: the referenced voucher does not exist
        """
        order = Order(customer_id=request.customer_id, order_items=list(request.order_items))

        if request.voucher_id is not None:
            voucher = await self.voucher_repository.find_by_id(request.voucher_id)
            if voucher is None:
                raise EntityNotFoundException("Voucher", request.voucher_id)
            order.apply_voucher(voucher)

        await self.order_repository.save(order)
        logger.info(f"Order created: {order.id} customer={order.customer_id} total={order.total_amount()}")
        return order


__all__ = ["CreateOrderUseCase", "CreateOrderRequest"]
