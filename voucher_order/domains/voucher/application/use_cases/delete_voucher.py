"""
Voucher Removal Use Cases
"""

import logging
from uuid import UUID

from voucher_order.core.domain import EntityNotFoundException
from voucher_order.domains.voucher.application.ports import IVoucherRepository

logger = logging.getLogger(__name__)


class DeleteVoucherUseCase:
    """Use Case: Delete a single voucher."""

    def __init__(self, voucher_repository: IVoucherRepository):
        self.voucher_repository = voucher_repository

    async def execute(self, voucher_id: UUID) -> None:
        deleted = await self.voucher_repository.delete_by_id(voucher_id)
        if deleted == 0:
            raise EntityNotFoundException("Voucher", voucher_id)
        logger.info(f"Voucher deleted: {voucher_id}")


class RevokeCustomerVouchersUseCase:
    """Use Case: Delete every voucher a customer holds; returns how many."""

    def __init__(self, voucher_repository: IVoucherRepository):
        self.voucher_repository = voucher_repository

    async def execute(self, customer_id: UUID) -> int:
        deleted = await self.voucher_repository.delete_by_customer_id(customer_id)
        logger.info(f"Revoked {deleted} vouchers of customer {customer_id}")
        return deleted


__all__ = ["DeleteVoucherUseCase", "RevokeCustomerVouchersUseCase"]
