"""
Customer Query Use Cases
"""

import logging
from uuid import UUID

from voucher_order.core.domain import EntityNotFoundException
from voucher_order.domains.customer.application.ports import ICustomerRepository
from voucher_order.domains.customer.domain.entities.customer import Customer

logger = logging.getLogger(__name__)


class GetCustomerUseCase:
    """Use Case: Get Customer by ID."""

    def __init__(self, customer_repository: ICustomerRepository):
        self.customer_repository = customer_repository

    async def execute(self, customer_id: UUID) -> Customer:
        customer = await self.customer_repository.find_by_id(customer_id)
        if customer is None:
            raise EntityNotFoundException("Customer", customer_id)
        return customer


class ListCustomersUseCase:
    """Use Case: List every customer, optionally by exact name."""

    def __init__(self, customer_repository: ICustomerRepository):
        self.customer_repository = customer_repository

    async def execute(self, name: str | None = None) -> list[Customer]:
        if name:
            return await self.customer_repository.find_by_name(name)
        return await self.customer_repository.find_all()


class FindBlacklistCustomersUseCase:
    """
    Use Case: Find blacklisted customers

    Loads all customers and keeps those whose type is BLACKLIST.
    """

    def __init__(self, customer_repository: ICustomerRepository):
        self.customer_repository = customer_repository

    async def execute(self) -> list[Customer]:
        customers = await self.customer_repository.find_all()
        blacklist = [customer for customer in customers if customer.is_blacklisted()]
        logger.debug(f"{len(blacklist)} of {len(customers)} customers are blacklisted")
        return blacklist


class GetVoucherOwnerUseCase:
    """Use Case: Find the customer holding a voucher."""

    def __init__(self, customer_repository: ICustomerRepository):
        self.customer_repository = customer_repository

    async def execute(self, voucher_id: UUID) -> Customer:
        """
        Raises:
            EntityNotFoundException: voucher missing or not assigned
        """
        customer = await self.customer_repository.find_by_voucher_id(voucher_id)
        if customer is None:
            raise EntityNotFoundException(
                "Customer", voucher_id, message=f"No customer holds voucher {voucher_id}"
            )
        return customer


__all__ = [
    "GetCustomerUseCase",
    "ListCustomersUseCase",
    "FindBlacklistCustomersUseCase",
    "GetVoucherOwnerUseCase",
]
