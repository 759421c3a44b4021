"""
Order Repository Implementation

SQL-template implementation of IOrderRepository. An order is stored as one
`orders` row plus one `order_items` row per item; the voucher is referenced
by id and loaded on read.
"""

import logging
from typing import Any
from uuid import UUID

from voucher_order.core.domain import utc_now
from voucher_order.database.converters import as_utc, bin_to_uuid, uuid_to_bin
from voucher_order.domains.order.application.ports import IOrderRepository
from voucher_order.domains.order.domain.entities.order import Order
from voucher_order.domains.order.domain.value_objects import OrderItem, OrderStatus
from voucher_order.domains.order.infrastructure.repositories.order_sql import OrderSql
from voucher_order.domains.voucher.domain.entities.voucher import Voucher
from voucher_order.domains.voucher.infrastructure.repositories import VoucherSql, voucher_from_row
from voucher_order.repositories.base import SQLTemplateRepository

logger = logging.getLogger(__name__)


def item_from_row(row: Any) -> OrderItem:
    return OrderItem(
        product_id=bin_to_uuid(row["product_id"]),
        product_price=int(row["product_price"]),
        quantity=int(row["quantity"]),
    )


def order_from_row(row: Any, items: list[OrderItem], voucher: Voucher | None) -> Order:
    """Map an `orders` row plus its loaded items and voucher to an Order."""
    return Order(
        id=bin_to_uuid(row["order_id"]),
        customer_id=bin_to_uuid(row["customer_id"]),
        order_items=items,
        voucher=voucher,
        order_status=OrderStatus.from_string(row["order_status"]),
        created_at=as_utc(row["created_at"]),
        updated_at=as_utc(row["updated_at"]),
    )


class SQLOrderRepository(SQLTemplateRepository[Order], IOrderRepository):
    """
    Order persistence through parameterized SQL templates.
    """

    table = "orders"

    async def _load_items(self, order_id: bytes) -> list[OrderItem]:
        result = await self.session.execute(OrderSql.SELECT_ITEMS, {"order_id": order_id})
        return [item_from_row(row) for row in result.mappings().all()]

    async def _load_voucher(self, voucher_id: bytes | None) -> Voucher | None:
        if voucher_id is None:
            return None
        result = await self.session.execute(VoucherSql.SELECT_BY_ID, {"voucher_id": voucher_id})
        row = result.mappings().first()
        return voucher_from_row(row) if row else None

    async def _hydrate(self, row: Any) -> Order:
        items = await self._load_items(row["order_id"])
        voucher = await self._load_voucher(row["voucher_id"])
        return order_from_row(row, items, voucher)

    async def _fetch_orders(self, statement, params: dict[str, Any] | None = None) -> list[Order]:
        result = await self.session.execute(statement, params or {})
        return [await self._hydrate(row) for row in result.mappings().all()]

    async def save(self, order: Order) -> UUID:
        """Insert the order and its items in one transaction; returns the id."""
        order_id = uuid_to_bin(order.id)
        statements: list[tuple[Any, Any]] = [
            (
                OrderSql.INSERT,
                {
                    "order_id": order_id,
                    "customer_id": uuid_to_bin(order.customer_id),
                    "voucher_id": uuid_to_bin(order.voucher_id),
                    "order_status": order.order_status.value,
                    "created_at": order.created_at,
                    "updated_at": order.updated_at,
                },
            )
        ]
        if order.order_items:
            statements.append(
                (
                    OrderSql.INSERT_ITEM,
                    [
                        {
                            "order_id": order_id,
                            "product_id": uuid_to_bin(item.product_id),
                            "product_price": item.product_price,
                            "quantity": item.quantity,
                            "created_at": order.created_at,
                            "updated_at": order.updated_at,
                        }
                        for item in order.order_items
                    ],
                )
            )
        await self._write_all(statements)
        logger.info(f"Order saved: {order.id} with {len(order.order_items)} items")
        return order.id

    async def find_by_id(self, order_id: UUID) -> Order | None:
        result = await self.session.execute(OrderSql.SELECT_BY_ID, {"order_id": uuid_to_bin(order_id)})
        row = result.mappings().first()
        return await self._hydrate(row) if row else None

    async def find_all(self) -> list[Order]:
        return await self._fetch_orders(OrderSql.SELECT_ALL)

    async def find_by_customer_id(self, customer_id: UUID) -> list[Order]:
        return await self._fetch_orders(OrderSql.SELECT_BY_CUSTOMER_ID, {"customer_id": uuid_to_bin(customer_id)})

    async def update_by_id(self, order: Order) -> int:
        """
        Persist status and applied voucher of an existing order.

        Raises:
            NoRowsUpdatedException: no order has this id
        """
        return await self._update_by_id(
            OrderSql.UPDATE_BY_ID,
            {
                "order_id": uuid_to_bin(order.id),
                "order_status": order.order_status.value,
                "voucher_id": uuid_to_bin(order.voucher_id),
                "updated_at": order.updated_at,
            },
            order.id,
        )

    async def update_customer_id(self, order_id: UUID, customer_id: UUID) -> int:
        return await self._write(
            OrderSql.UPDATE_CUSTOMER_ID,
            {
                "order_id": uuid_to_bin(order_id),
                "customer_id": uuid_to_bin(customer_id),
                "updated_at": utc_now(),
            },
        )

    async def delete_by_id(self, order_id: UUID) -> int:
        """Delete an order; its items go with it (ON DELETE CASCADE)."""
        return await self._write(OrderSql.DELETE_BY_ID, {"order_id": uuid_to_bin(order_id)})

    async def delete_all(self) -> int:
        return await self._write(OrderSql.DELETE_ALL)

    async def delete_by_customer_id(self, customer_id: UUID) -> int:
        return await self._write(OrderSql.DELETE_BY_CUSTOMER_ID, {"customer_id": uuid_to_bin(customer_id)})
