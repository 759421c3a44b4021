"""
Tests for the command-line harness.

Database access is replaced by a mock session and mock repositories.
"""

import logging
from contextlib import asynccontextmanager
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from voucher_order.core.domain import ValidationException
from voucher_order.domains.voucher.domain import PercentDiscountVoucher, VoucherType
from voucher_order.scripts import voucher_cli


@pytest.fixture
def cli_db(monkeypatch):
    """Route get_async_db_context to a mock session."""
    session = AsyncMock()

    @asynccontextmanager
    async def fake_context():
        yield session

    monkeypatch.setattr(voucher_cli, "get_async_db_context", fake_context)
    return session


@pytest.fixture
def cli_voucher_repository(monkeypatch):
    repo = AsyncMock()
    repo.find_all = AsyncMock(return_value=[])
    monkeypatch.setattr(voucher_cli, "SQLVoucherRepository", MagicMock(return_value=repo))
    return repo


@pytest.fixture
def cli_customer_repository(monkeypatch):
    repo = AsyncMock()
    repo.find_by_id = AsyncMock(return_value=None)
    monkeypatch.setattr(voucher_cli, "SQLCustomerRepository", MagicMock(return_value=repo))
    return repo


@pytest.fixture
def cli_order_repository(monkeypatch):
    repo = AsyncMock()
    monkeypatch.setattr(voucher_cli, "SQLOrderRepository", MagicMock(return_value=repo))
    return repo


# ============================================================================
# Argument parsing
# ============================================================================


@pytest.mark.unit
def test_parse_item():
    product_id = uuid4()

    item = voucher_cli.parse_item(f"{product_id}:1500:3")

    assert item.product_id == product_id
    assert item.product_price == 1500
    assert item.quantity == 3
    assert item.subtotal == 4500


@pytest.mark.unit
@pytest.mark.parametrize("value", ["abc", "x:1:1", f"{uuid4()}:ten:1", f"{uuid4()}:100:0"])
def test_parse_item_rejects(value):
    with pytest.raises(ValidationException) as exc_info:
        voucher_cli.parse_item(value)

    assert exc_info.value.field == "item"


@pytest.mark.unit
def test_parser_create_order_collects_items():
    customer_id = uuid4()
    product_id = uuid4()

    args = voucher_cli.build_parser().parse_args(
        [
            "create-order",
            "--customer",
            str(customer_id),
            "--item",
            f"{product_id}:100:1",
            "--item",
            f"{product_id}:50:2",
        ]
    )

    assert args.customer == customer_id
    assert [item.quantity for item in args.item] == [1, 2]
    assert args.voucher is None


@pytest.mark.unit
def test_parser_voucher_type_is_case_insensitive():
    args = voucher_cli.build_parser().parse_args(["create-voucher", "--type", "percent", "--value", "10"])

    assert args.type is VoucherType.PERCENT


@pytest.mark.unit
def test_parser_rejects_bad_item():
    with pytest.raises(SystemExit):
        voucher_cli.build_parser().parse_args(["create-order", "--customer", str(uuid4()), "--item", "nope"])


@pytest.mark.unit
def test_parser_requires_command():
    with pytest.raises(SystemExit):
        voucher_cli.build_parser().parse_args([])


# ============================================================================
# Commands
# ============================================================================


@pytest.mark.unit
def test_create_voucher_command(cli_db, cli_voucher_repository, capsys):
    exit_code = voucher_cli.main(["create-voucher", "--type", "PERCENT", "--value", "10"])

    assert exit_code == 0
    saved = cli_voucher_repository.save.call_args.args[0]
    assert isinstance(saved, PercentDiscountVoucher)
    assert saved.discount_value == 10


@pytest.mark.unit
def test_create_voucher_out_of_range(cli_db, cli_voucher_repository):
    exit_code = voucher_cli.main(["create-voucher", "--type", "PERCENT", "--value", "150"])

    assert exit_code == 1
    cli_voucher_repository.save.assert_not_awaited()


@pytest.mark.unit
def test_create_voucher_for_unknown_customer(cli_db, cli_voucher_repository, cli_customer_repository, caplog):
    caplog.set_level(logging.DEBUG, logger=voucher_cli.__name__)
    customer_id = uuid4()
    argv = ["create-voucher", "--type", "FIXED_AMOUNT", "--value", "500", "--customer", str(customer_id)]

    exit_code = voucher_cli.main(argv)

    assert exit_code == 1
    cli_customer_repository.find_by_id.assert_awaited_once_with(customer_id)
    cli_voucher_repository.save.assert_not_awaited()
    assert "ENTITY_NOT_FOUND: Customer with ID" in caplog.text
    assert "'entity_type': 'Customer'" in caplog.text


@pytest.mark.unit
def test_list_vouchers_empty(cli_db, cli_voucher_repository, capsys):
    assert voucher_cli.main(["list-vouchers"]) == 0

    assert "No vouchers" in capsys.readouterr().out


@pytest.mark.unit
def test_create_order_with_voucher(cli_db, cli_voucher_repository, cli_order_repository, capsys):
    # Arrange
    voucher = PercentDiscountVoucher(discount_value=10)
    cli_voucher_repository.find_by_id.return_value = voucher
    argv = [
        "create-order",
        "--customer",
        str(uuid4()),
        "--item",
        f"{uuid4()}:1000:2",
        "--voucher",
        str(voucher.id),
    ]

    # Act
    exit_code = voucher_cli.main(argv)

    # Assert
    assert exit_code == 0
    cli_order_repository.save.assert_awaited_once()
    assert "total: 1800" in capsys.readouterr().out


@pytest.mark.unit
def test_create_order_missing_voucher(cli_db, cli_voucher_repository, cli_order_repository):
    cli_voucher_repository.find_by_id.return_value = None

    exit_code = voucher_cli.main(["create-order", "--customer", str(uuid4()), "--voucher", str(uuid4())])

    assert exit_code == 1
    cli_order_repository.save.assert_not_awaited()


@pytest.mark.unit
def test_create_customer_invalid_email(cli_db):
    assert voucher_cli.main(["create-customer", "--name", "park", "--email", "nope"]) == 1
