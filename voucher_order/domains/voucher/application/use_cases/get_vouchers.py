"""
Voucher Query Use Cases

Single voucher lookup and filtered listing.
"""

import logging
from dataclasses import dataclass
from datetime import date
from uuid import UUID

from voucher_order.core.domain import EntityNotFoundException, ValidationException
from voucher_order.domains.voucher.application.ports import IVoucherRepository
from voucher_order.domains.voucher.domain.entities.voucher import Voucher
from voucher_order.domains.voucher.domain.value_objects.voucher_type import VoucherType

logger = logging.getLogger(__name__)


class GetVoucherUseCase:
    """Use Case: Get Voucher by ID."""

    def __init__(self, voucher_repository: IVoucherRepository):
        self.voucher_repository = voucher_repository

    async def execute(self, voucher_id: UUID) -> Voucher:
        voucher = await self.voucher_repository.find_by_id(voucher_id)
        if voucher is None:
            raise EntityNotFoundException("Voucher", voucher_id)
        return voucher


@dataclass
class ListVouchersRequest:
    """
    Filters for listing vouchers.

    Either `customer_id`, or `voucher_type` together with `created_on`,
    or nothing (all vouchers).
    """

    customer_id: UUID | None = None
    voucher_type: VoucherType | None = None
    created_on: date | None = None


class ListVouchersUseCase:
    """
    Use Case: List Vouchers

    Chooses the repository query matching the supplied filters.
    """

    def __init__(self, voucher_repository: IVoucherRepository):
        self.voucher_repository = voucher_repository

    async def execute(self, request: ListVouchersRequest | None = None) -> list[Voucher]:
        request = request or ListVouchersRequest()

        if request.customer_id is not None:
            return await self.voucher_repository.find_by_customer_id(request.customer_id)

        if (request.voucher_type is None) != (request.created_on is None):
            raise ValidationException("Voucher type and date must be given together", field="voucher_type")

        if request.voucher_type is not None and request.created_on is not None:
            return await self.voucher_repository.find_by_voucher_type_and_date(
                request.voucher_type, request.created_on
            )

        vouchers = await self.voucher_repository.find_all()
        logger.debug(f"Listed {len(vouchers)} vouchers")
        return vouchers


__all__ = [
    "GetVoucherUseCase",
    "ListVouchersUseCase",
    "ListVouchersRequest",
]
