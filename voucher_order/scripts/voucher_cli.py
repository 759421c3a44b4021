#!/usr/bin/env python
"""
Command-line harness for the voucher/order service.

Usage:
    python -m voucher_order.scripts.voucher_cli init-db
    python -m voucher_order.scripts.voucher_cli create-customer --name park --email park@example.com
    python -m voucher_order.scripts.voucher_cli create-voucher --type PERCENT --value 10
    python -m voucher_order.scripts.voucher_cli list-vouchers
    python -m voucher_order.scripts.voucher_cli blacklist
    python -m voucher_order.scripts.voucher_cli create-order --customer <uuid> \
        --item <product-uuid>:1000:2 --voucher <uuid>
"""

import argparse
import asyncio
import logging
from uuid import UUID

from pydantic import ValidationError

from voucher_order.core.domain import DomainException, ValidationException
from voucher_order.database.async_db import get_async_db_context, init_db
from voucher_order.domains.customer.application.dto import CustomerCreateRequest
from voucher_order.domains.customer.application.use_cases import (
    CreateCustomerUseCase,
    FindBlacklistCustomersUseCase,
)
from voucher_order.domains.customer.infrastructure.repositories import SQLCustomerRepository
from voucher_order.domains.order.application.use_cases import CreateOrderRequest, CreateOrderUseCase
from voucher_order.domains.order.domain.value_objects import OrderItem
from voucher_order.domains.order.infrastructure.repositories import SQLOrderRepository
from voucher_order.domains.voucher.application.use_cases import (
    CreateVoucherRequest,
    CreateVoucherUseCase,
    ListVouchersUseCase,
)
from voucher_order.domains.voucher.domain.value_objects.voucher_type import VoucherType
from voucher_order.domains.voucher.infrastructure.repositories import SQLVoucherRepository

logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
logger = logging.getLogger(__name__)


def parse_item(value: str) -> OrderItem:
    """Parse `product_uuid:price:quantity` into an OrderItem."""
    parts = value.split(":")
    if len(parts) != 3:
        raise ValidationException(f"Item must look like product:price:quantity, got '{value}'", field="item")
    product_id, price, quantity = parts
    try:
        return OrderItem(product_id=UUID(product_id), product_price=int(price), quantity=int(quantity))
    except ValueError as e:
        raise ValidationException(f"Invalid item '{value}': {e}", field="item") from e


async def create_customer(name: str, email: str) -> None:
    async with get_async_db_context() as db:
        use_case = CreateCustomerUseCase(customer_repository=SQLCustomerRepository(db))
        customer = await use_case.execute(CustomerCreateRequest(name=name, email=email))
        print(customer)
        print(f"  id: {customer.id}")


async def create_voucher(voucher_type: VoucherType, value: int, customer_id: UUID | None) -> None:
    async with get_async_db_context() as db:
        use_case = CreateVoucherUseCase(
            voucher_repository=SQLVoucherRepository(db),
            customer_repository=SQLCustomerRepository(db),
        )
        voucher = await use_case.execute(
            CreateVoucherRequest(voucher_type=voucher_type, discount_value=value, customer_id=customer_id)
        )
        print(voucher)


async def list_vouchers() -> None:
    async with get_async_db_context() as db:
        vouchers = await ListVouchersUseCase(voucher_repository=SQLVoucherRepository(db)).execute()
        if not vouchers:
            print("No vouchers")
            return
        for voucher in vouchers:
            print(voucher)


async def show_blacklist() -> None:
    async with get_async_db_context() as db:
        customers = await FindBlacklistCustomersUseCase(customer_repository=SQLCustomerRepository(db)).execute()
        print(f"{len(customers)} blacklisted customers")
        for customer in customers:
            print(f"  {customer}")


async def create_order(customer_id: UUID, items: list[OrderItem], voucher_id: UUID | None) -> None:
    async with get_async_db_context() as db:
        use_case = CreateOrderUseCase(
            order_repository=SQLOrderRepository(db),
            voucher_repository=SQLVoucherRepository(db),
        )
        order = await use_case.execute(
            CreateOrderRequest(customer_id=customer_id, order_items=items, voucher_id=voucher_id)
        )
        print(f"Order {order.id} ({order.order_status.value}) total: {order.total_amount()}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Customers, vouchers and orders")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("init-db", help="Create missing tables")

    customer = subparsers.add_parser("create-customer", help="Register a customer")
    customer.add_argument("--name", required=True)
    customer.add_argument("--email", required=True)

    voucher = subparsers.add_parser("create-voucher", help="Create a voucher")
    voucher.add_argument("--type", required=True, type=VoucherType.from_string, choices=list(VoucherType))
    voucher.add_argument("--value", required=True, type=int, help="Amount or percent")
    voucher.add_argument("--customer", type=UUID, default=None, help="Owning customer id")

    subparsers.add_parser("list-vouchers", help="Print every voucher")
    subparsers.add_parser("blacklist", help="Print blacklisted customers")

    order = subparsers.add_parser("create-order", help="Place an order")
    order.add_argument("--customer", required=True, type=UUID)
    order.add_argument("--item", action="append", default=[], type=parse_item, help="product:price:quantity")
    order.add_argument("--voucher", type=UUID, default=None)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    commands = {
        "init-db": lambda: init_db(),
        "create-customer": lambda: create_customer(args.name, args.email),
        "create-voucher": lambda: create_voucher(args.type, args.value, args.customer),
        "list-vouchers": list_vouchers,
        "blacklist": show_blacklist,
        "create-order": lambda: create_order(args.customer, args.item, args.voucher),
    }

    try:
        asyncio.run(commands[args.command]())
    except DomainException as e:
        logger.error(f"{e.code}: {e.message}")
        logger.debug(f"Error details: {e.to_dict()}")
        return 1
    except ValidationError as e:
        for error in e.errors():
            logger.error(f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
