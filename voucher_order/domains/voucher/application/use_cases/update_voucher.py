"""
Voucher Update Use Cases

Changing a voucher's kind/value and (re)assigning it to a customer.
"""

import logging
from dataclasses import dataclass
from uuid import UUID

from voucher_order.core.domain import EntityNotFoundException, utc_now
from voucher_order.domains.customer.application.ports import ICustomerRepository
from voucher_order.domains.voucher.application.ports import IVoucherRepository
from voucher_order.domains.voucher.domain.entities.voucher import Voucher, create_voucher
from voucher_order.domains.voucher.domain.value_objects.voucher_type import VoucherType

logger = logging.getLogger(__name__)


@dataclass
class UpdateVoucherRequest:
    """Request for replacing the kind and discount value of a voucher."""

    voucher_id: UUID
    voucher_type: VoucherType | str
    discount_value: int


class UpdateVoucherUseCase:
    """
    Use Case: Update Voucher

    The variant may change (e.g. PERCENT -> FIXED_AMOUNT); ownership and
    creation time are kept.
    """

    def __init__(self, voucher_repository: IVoucherRepository):
        self.voucher_repository = voucher_repository

    async def execute(self, request: UpdateVoucherRequest) -> Voucher:
        """
        Raises:
            EntityNotFoundException: voucher does not exist
            ValidationException: invalid discount for the new type
            NoRowsUpdatedException: voucher vanished between read and write
        """
        current = await self.voucher_repository.find_by_id(request.voucher_id)
        if current is None:
            raise EntityNotFoundException("Voucher", request.voucher_id)

        updated = create_voucher(
            voucher_type=request.voucher_type,
            discount_value=request.discount_value,
            voucher_id=current.id,
            customer_id=current.customer_id,
            created_at=current.created_at,
            updated_at=utc_now(),
        )
        await self.voucher_repository.update_by_id(updated)
        logger.info(f"Voucher updated: {updated.id} {updated.voucher_type.value}={updated.discount_value}")
        return updated


@dataclass
class AssignVoucherRequest:
    """Give a voucher to a customer; `customer_id=None` releases it."""

    voucher_id: UUID
    customer_id: UUID | None


class AssignVoucherUseCase:
    """
    Use Case: Assign Voucher

    Responsibilities:
    - Check the voucher exists
    - Check the target customer exists (when assigning)
    - Update the customer association
    """

    def __init__(
        self,
        voucher_repository: IVoucherRepository,
        customer_repository: ICustomerRepository,
    ):
        self.voucher_repository = voucher_repository
        self.customer_repository = customer_repository

    async def execute(self, request: AssignVoucherRequest) -> Voucher:
        voucher = await self.voucher_repository.find_by_id(request.voucher_id)
        if voucher is None:
            raise EntityNotFoundException("Voucher", request.voucher_id)

        if request.customer_id is not None:
            customer = await self.customer_repository.find_by_id(request.customer_id)
            if customer is None:
                raise EntityNotFoundException("Customer", request.customer_id)
            voucher.assign_to(request.customer_id)
        else:
            voucher.release()

        await self.voucher_repository.update_customer_id(voucher.id, voucher.customer_id)
        logger.info(f"Voucher {voucher.id} assigned to customer {voucher.customer_id}")
        return voucher


__all__ = [
    "UpdateVoucherUseCase",
    "UpdateVoucherRequest",
    "AssignVoucherUseCase",
    "AssignVoucherRequest",
]
