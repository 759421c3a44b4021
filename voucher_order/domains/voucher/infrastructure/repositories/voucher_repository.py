"""
Voucher Repository Implementation

SQL-template implementation of IVoucherRepository.
"""

import logging
from datetime import date
from typing import Any
from uuid import UUID

from voucher_order.core.domain import utc_now
from voucher_order.database.converters import as_utc, bin_to_uuid, day_bounds, uuid_to_bin
from voucher_order.domains.voucher.application.ports import IVoucherRepository
from voucher_order.domains.voucher.domain.entities.voucher import Voucher, create_voucher
from voucher_order.domains.voucher.domain.value_objects.voucher_type import VoucherType
from voucher_order.domains.voucher.infrastructure.repositories.voucher_sql import VoucherSql
from voucher_order.repositories.base import SQLTemplateRepository

logger = logging.getLogger(__name__)


def voucher_from_row(row: Any) -> Voucher:
    """Map a `vouchers` row (mapping) to the matching Voucher variant."""
    return create_voucher(
        voucher_type=row["type"],
        discount_value=int(row["rate"]),
        voucher_id=bin_to_uuid(row["voucher_id"]),
        customer_id=bin_to_uuid(row["customer_id"]),
        created_at=as_utc(row["created_at"]),
        updated_at=as_utc(row["updated_at"]),
    )


class SQLVoucherRepository(SQLTemplateRepository[Voucher], IVoucherRepository):
    """
    Voucher persistence through parameterized SQL templates.
    """

    table = "vouchers"

    def _to_entity(self, row: Any) -> Voucher:
        return voucher_from_row(row)

    async def save(self, voucher: Voucher) -> UUID:
        """Insert a voucher and return its id."""
        await self._write(
            VoucherSql.INSERT,
            {
                "voucher_id": uuid_to_bin(voucher.id),
                "rate": voucher.discount_value,
                "type": voucher.voucher_type.value,
                "customer_id": uuid_to_bin(voucher.customer_id),
                "created_at": voucher.created_at,
                "updated_at": voucher.updated_at,
            },
        )
        logger.info(f"Voucher saved: {voucher.id} ({voucher.voucher_type.value})")
        return voucher.id

    async def find_by_id(self, voucher_id: UUID) -> Voucher | None:
        return await self._fetch_one(VoucherSql.SELECT_BY_ID, {"voucher_id": uuid_to_bin(voucher_id)})

    async def find_all(self) -> list[Voucher]:
        return await self._fetch_all(VoucherSql.SELECT_ALL)

    async def find_by_customer_id(self, customer_id: UUID) -> list[Voucher]:
        return await self._fetch_all(VoucherSql.SELECT_BY_CUSTOMER_ID, {"customer_id": uuid_to_bin(customer_id)})

    async def find_by_voucher_type_and_date(self, voucher_type: VoucherType, created_on: date) -> list[Voucher]:
        """Vouchers of `voucher_type` created on the given UTC calendar day."""
        start_at, end_at = day_bounds(created_on)
        return await self._fetch_all(
            VoucherSql.SELECT_BY_TYPE_AND_DATE,
            {"type": voucher_type.value, "start_at": start_at, "end_at": end_at},
        )

    async def update_by_id(self, voucher: Voucher) -> int:
        """
        Overwrite type and discount value of an existing voucher.

        Raises:
            NoRowsUpdatedException: no voucher has this id
        """
        return await self._update_by_id(
            VoucherSql.UPDATE_BY_ID,
            {
                "voucher_id": uuid_to_bin(voucher.id),
                "rate": voucher.discount_value,
                "type": voucher.voucher_type.value,
                "updated_at": voucher.updated_at,
            },
            voucher.id,
        )

    async def update_customer_id(self, voucher_id: UUID, customer_id: UUID | None) -> int:
        """Set (or clear, with None) the owning customer of a voucher."""
        return await self._write(
            VoucherSql.UPDATE_CUSTOMER_ID,
            {
                "voucher_id": uuid_to_bin(voucher_id),
                "customer_id": uuid_to_bin(customer_id),
                "updated_at": utc_now(),
            },
        )

    async def delete_by_id(self, voucher_id: UUID) -> int:
        return await self._write(VoucherSql.DELETE_BY_ID, {"voucher_id": uuid_to_bin(voucher_id)})

    async def delete_all(self) -> int:
        return await self._write(VoucherSql.DELETE_ALL)

    async def delete_by_customer_id(self, customer_id: UUID) -> int:
        return await self._write(VoucherSql.DELETE_BY_CUSTOMER_ID, {"customer_id": uuid_to_bin(customer_id)})
