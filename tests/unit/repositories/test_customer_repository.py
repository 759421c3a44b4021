"""
Unit tests for SQLCustomerRepository.
"""

from datetime import UTC, datetime
from uuid import uuid4

import pytest

from voucher_order.core.domain import NoRowsUpdatedException
from voucher_order.domains.customer.domain import CustomerType
from voucher_order.domains.customer.infrastructure.repositories import (
    CustomerSql,
    SQLCustomerRepository,
    customer_from_row,
)


@pytest.fixture
def customer_row():
    return {
        "customer_id": uuid4().bytes,
        "name": "kim",
        "email": "kim@example.com",
        "customer_type": "BLACKLIST",
        "last_login_at": None,
        "created_at": datetime(2024, 5, 17, tzinfo=UTC),
        "updated_at": datetime(2024, 5, 17, tzinfo=UTC),
    }


@pytest.mark.unit
@pytest.mark.repository
def test_customer_from_row(customer_row):
    customer = customer_from_row(customer_row)

    assert customer.id.bytes == customer_row["customer_id"]
    assert customer.customer_type is CustomerType.BLACKLIST
    assert customer.is_blacklisted()


@pytest.mark.unit
@pytest.mark.repository
@pytest.mark.asyncio
async def test_save(mock_async_session, sample_customer):
    repository = SQLCustomerRepository(mock_async_session)

    assert await repository.save(sample_customer) == sample_customer.id

    statement, params = mock_async_session.execute.call_args.args
    assert statement is CustomerSql.INSERT
    assert params["customer_id"] == sample_customer.id.bytes
    assert params["customer_type"] == "NORMAL"
    mock_async_session.commit.assert_awaited_once()


@pytest.mark.unit
@pytest.mark.repository
@pytest.mark.asyncio
async def test_find_all(mock_async_session, result_factory, customer_row):
    mock_async_session.execute.return_value = result_factory([customer_row, customer_row])
    repository = SQLCustomerRepository(mock_async_session)

    customers = await repository.find_all()

    assert len(customers) == 2
    assert mock_async_session.execute.call_args.args[0] is CustomerSql.SELECT_ALL


@pytest.mark.unit
@pytest.mark.repository
@pytest.mark.asyncio
async def test_find_by_customer_type(mock_async_session, result_factory, customer_row):
    mock_async_session.execute.return_value = result_factory([customer_row])
    repository = SQLCustomerRepository(mock_async_session)

    customers = await repository.find_by_customer_type(CustomerType.BLACKLIST)

    assert customers[0].name == "kim"
    assert mock_async_session.execute.call_args.args[1] == {"customer_type": "BLACKLIST"}


@pytest.mark.unit
@pytest.mark.repository
@pytest.mark.asyncio
async def test_find_by_voucher_id_binds_bytes(mock_async_session, result_factory, customer_row):
    voucher_id = uuid4()
    mock_async_session.execute.return_value = result_factory([customer_row])
    repository = SQLCustomerRepository(mock_async_session)

    customer = await repository.find_by_voucher_id(voucher_id)

    assert customer is not None
    statement, params = mock_async_session.execute.call_args.args
    assert statement is CustomerSql.SELECT_BY_VOUCHER_ID
    assert params == {"voucher_id": voucher_id.bytes}


@pytest.mark.unit
@pytest.mark.repository
@pytest.mark.asyncio
async def test_update_by_id_without_match_raises(mock_async_session, result_factory, sample_customer):
    mock_async_session.execute.return_value = result_factory(rowcount=0)
    repository = SQLCustomerRepository(mock_async_session)

    with pytest.raises(NoRowsUpdatedException, match="No rows were updated."):
        await repository.update_by_id(sample_customer)


@pytest.mark.unit
@pytest.mark.repository
@pytest.mark.asyncio
async def test_update_last_login(mock_async_session, result_factory):
    mock_async_session.execute.return_value = result_factory(rowcount=1)
    repository = SQLCustomerRepository(mock_async_session)

    assert await repository.update_last_login(uuid4()) == 1

    params = mock_async_session.execute.call_args.args[1]
    assert params["last_login_at"].tzinfo is not None


@pytest.mark.unit
@pytest.mark.repository
@pytest.mark.asyncio
async def test_count(mock_async_session, result_factory):
    mock_async_session.execute.return_value = result_factory(scalar=7)
    repository = SQLCustomerRepository(mock_async_session)

    assert await repository.count() == 7
    mock_async_session.commit.assert_not_awaited()
