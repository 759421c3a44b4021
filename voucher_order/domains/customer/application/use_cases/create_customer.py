"""
Create Customer Use Case
"""

import logging

from voucher_order.core.domain import DuplicateEntityException
from voucher_order.domains.customer.application.dto import CustomerCreateRequest
from voucher_order.domains.customer.application.ports import ICustomerRepository
from voucher_order.domains.customer.domain.entities.customer import Customer

logger = logging.getLogger(__name__)


class CreateCustomerUseCase:
    """
    Use Case: Register a customer

    Responsibilities:
    - Reject a second customer with the same email
    - Build and persist the Customer
    """

    def __init__(self, customer_repository: ICustomerRepository):
        self.customer_repository = customer_repository

    async def execute(self, request: CustomerCreateRequest) -> Customer:
        """
        Raises:
            DuplicateEntityException: email already registered
            ValidationException: name or email rejected by the entity
        """
        email = str(request.email)
        if await self.customer_repository.find_by_email(email) is not None:
            raise DuplicateEntityException("Customer", "email", email)

        customer = Customer(name=request.name, email=email, customer_type=request.customer_type)
        await self.customer_repository.save(customer)
        logger.info(f"Customer created: {customer.id}")
        return customer


__all__ = ["CreateCustomerUseCase"]
