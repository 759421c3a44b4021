"""
Delete Customer Use Case
"""

import logging
from uuid import UUID

from voucher_order.core.domain import EntityNotFoundException
from voucher_order.domains.customer.application.ports import ICustomerRepository

logger = logging.getLogger(__name__)


class DeleteCustomerUseCase:
    """
    Use Case: Delete Customer

    Vouchers held by the customer are released by the database
    (ON DELETE SET NULL).
    """

    def __init__(self, customer_repository: ICustomerRepository):
        self.customer_repository = customer_repository

    async def execute(self, customer_id: UUID) -> None:
        deleted = await self.customer_repository.delete_by_id(customer_id)
        if deleted == 0:
            raise EntityNotFoundException("Customer", customer_id)
        logger.info(f"Customer deleted: {customer_id}")


__all__ = ["DeleteCustomerUseCase"]
