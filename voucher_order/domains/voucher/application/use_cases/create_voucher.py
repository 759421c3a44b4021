"""
Create Voucher Use Case

Builds a validated voucher of the requested kind and persists it.
"""

import logging
from dataclasses import dataclass
from uuid import UUID

from voucher_order.core.domain import EntityNotFoundException
from voucher_order.domains.customer.application.ports import ICustomerRepository
from voucher_order.domains.voucher.application.ports import IVoucherRepository
from voucher_order.domains.voucher.domain.entities.voucher import Voucher, create_voucher
from voucher_order.domains.voucher.domain.value_objects.voucher_type import VoucherType

logger = logging.getLogger(__name__)


@dataclass
class CreateVoucherRequest:
    """Request for creating a voucher."""

    voucher_type: VoucherType | str
    discount_value: int
    customer_id: UUID | None = None


class CreateVoucherUseCase:
    """
    Use Case: Create Voucher

    Responsibilities:
    - Check the owning customer exists (when one is given)
    - Pick the voucher variant for the requested type
    - Validate the discount value (via the entity)
    - Persist via repository
    """

    def __init__(
        self,
        voucher_repository: IVoucherRepository,
        customer_repository: ICustomerRepository,
    ):
        """
        Initialize use case with dependencies.

        Args:
            voucher_repository: Repository for voucher data access
            customer_repository: Repository used to check the owner exists
        """
        self.voucher_repository = voucher_repository
        self.customer_repository = customer_repository

    async def execute(self, request: CreateVoucherRequest) -> Voucher:
        """
        Create a new voucher.

        Raises:
            ValidationException: unknown type or invalid discount value
            EntityNotFoundException: the owning customer does not exist
        """
        voucher = create_voucher(
            voucher_type=request.voucher_type,
            discount_value=request.discount_value,
            customer_id=request.customer_id,
        )
        if request.customer_id is not None:
            customer = await self.customer_repository.find_by_id(request.customer_id)
            if customer is None:
                raise EntityNotFoundException("Customer", request.customer_id)

        await self.voucher_repository.save(voucher)
        logger.info(f"Voucher created: {voucher.id} {voucher.voucher_type.value}={voucher.discount_value}")
        return voucher


__all__ = ["CreateVoucherUseCase", "CreateVoucherRequest"]
