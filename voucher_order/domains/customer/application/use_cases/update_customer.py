"""
Update Customer Use Cases
"""

import logging
from uuid import UUID

from voucher_order.core.domain import DuplicateEntityException, EntityNotFoundException
from voucher_order.domains.customer.application.dto import CustomerUpdateRequest
from voucher_order.domains.customer.application.ports import ICustomerRepository
from voucher_order.domains.customer.domain.entities.customer import Customer

logger = logging.getLogger(__name__)


class UpdateCustomerUseCase:
    """
    Use Case: Update Customer

    Applies a validated CustomerUpdateRequest to an existing customer.
    """

    def __init__(self, customer_repository: ICustomerRepository):
        self.customer_repository = customer_repository

    async def execute(self, customer_id: UUID, request: CustomerUpdateRequest) -> Customer:
        """
        Raises:
            EntityNotFoundException: customer does not exist
            DuplicateEntityException: email belongs to another customer
            NoRowsUpdatedException: customer vanished between read and write
        """
        customer = await self.customer_repository.find_by_id(customer_id)
        if customer is None:
            raise EntityNotFoundException("Customer", customer_id)

        email = str(request.email)
        if email != customer.email:
            holder = await self.customer_repository.find_by_email(email)
            if holder is not None and holder.id != customer.id:
                raise DuplicateEntityException("Customer", "email", email)

        customer.change_name(request.name)
        customer.change_email(email)
        customer.change_type(request.customer_type)

        await self.customer_repository.update_by_id(customer)
        logger.info(f"Customer updated: {customer.id}")
        return customer


class RecordCustomerLoginUseCase:
    """Use Case: Stamp the last login time of a customer."""

    def __init__(self, customer_repository: ICustomerRepository):
        self.customer_repository = customer_repository

    async def execute(self, customer_id: UUID) -> None:
        updated = await self.customer_repository.update_last_login(customer_id)
        if updated == 0:
            raise EntityNotFoundException("Customer", customer_id)


__all__ = ["UpdateCustomerUseCase", "RecordCustomerLoginUseCase"]
