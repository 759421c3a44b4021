"""
Customer Repository Implementation

SQL-template implementation of ICustomerRepository.
"""

import logging
from typing import Any
from uuid import UUID

from voucher_order.core.domain import utc_now
from voucher_order.database.converters import as_utc, bin_to_uuid, uuid_to_bin
from voucher_order.domains.customer.application.ports import ICustomerRepository
from voucher_order.domains.customer.domain.entities.customer import Customer
from voucher_order.domains.customer.domain.value_objects.customer_type import CustomerType
from voucher_order.domains.customer.infrastructure.repositories.customer_sql import CustomerSql
from voucher_order.repositories.base import SQLTemplateRepository

logger = logging.getLogger(__name__)


def customer_from_row(row: Any) -> Customer:
    """Map a `customers` row (mapping) to a Customer."""
    return Customer(
        id=bin_to_uuid(row["customer_id"]),
        name=row["name"],
        email=row["email"],
        customer_type=CustomerType.from_string(row["customer_type"]),
        last_login_at=as_utc(row["last_login_at"]),
        created_at=as_utc(row["created_at"]),
        updated_at=as_utc(row["updated_at"]),
    )


class SQLCustomerRepository(SQLTemplateRepository[Customer], ICustomerRepository):
    """
    Customer persistence through parameterized SQL templates.
    """

    table = "customers"

    def _to_entity(self, row: Any) -> Customer:
        return customer_from_row(row)

    async def save(self, customer: Customer) -> UUID:
        """Insert a customer and return its id."""
        await self._write(
            CustomerSql.INSERT,
            {
                "customer_id": uuid_to_bin(customer.id),
                "name": customer.name,
                "email": customer.email,
                "customer_type": customer.customer_type.value,
                "last_login_at": customer.last_login_at,
                "created_at": customer.created_at,
                "updated_at": customer.updated_at,
            },
        )
        logger.info(f"Customer saved: {customer.id}")
        return customer.id

    async def find_by_id(self, customer_id: UUID) -> Customer | None:
        return await self._fetch_one(CustomerSql.SELECT_BY_ID, {"customer_id": uuid_to_bin(customer_id)})

    async def find_all(self) -> list[Customer]:
        return await self._fetch_all(CustomerSql.SELECT_ALL)

    async def find_by_name(self, name: str) -> list[Customer]:
        return await self._fetch_all(CustomerSql.SELECT_BY_NAME, {"name": name})

    async def find_by_email(self, email: str) -> Customer | None:
        return await self._fetch_one(CustomerSql.SELECT_BY_EMAIL, {"email": email})

    async def find_by_customer_type(self, customer_type: CustomerType) -> list[Customer]:
        return await self._fetch_all(CustomerSql.SELECT_BY_TYPE, {"customer_type": customer_type.value})

    async def find_by_voucher_id(self, voucher_id: UUID) -> Customer | None:
        """Owner of the given voucher, if it has one."""
        return await self._fetch_one(CustomerSql.SELECT_BY_VOUCHER_ID, {"voucher_id": uuid_to_bin(voucher_id)})

    async def update_by_id(self, customer: Customer) -> int:
        """
        Overwrite name, email and type of an existing customer.

        Raises:
            NoRowsUpdatedException: no customer has this id
        """
        return await self._update_by_id(
            CustomerSql.UPDATE_BY_ID,
            {
                "customer_id": uuid_to_bin(customer.id),
                "name": customer.name,
                "email": customer.email,
                "customer_type": customer.customer_type.value,
                "updated_at": customer.updated_at,
            },
            customer.id,
        )

    async def update_last_login(self, customer_id: UUID) -> int:
        return await self._write(
            CustomerSql.UPDATE_LAST_LOGIN,
            {"customer_id": uuid_to_bin(customer_id), "last_login_at": utc_now()},
        )

    async def delete_by_id(self, customer_id: UUID) -> int:
        return await self._write(CustomerSql.DELETE_BY_ID, {"customer_id": uuid_to_bin(customer_id)})

    async def delete_all(self) -> int:
        return await self._write(CustomerSql.DELETE_ALL)

    async def count(self) -> int:
        result = await self.session.execute(CustomerSql.COUNT)
        return result.scalar_one()
