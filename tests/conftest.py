"""
Shared pytest fixtures for all tests.

Provides mock sessions and repositories, sample domain objects and a
FastAPI test client whose container hands out the mock repositories.
"""

import os
from collections.abc import AsyncGenerator
from datetime import UTC, datetime
from typing import Any
from unittest.mock import AsyncMock, MagicMock
from uuid import UUID, uuid4

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession

# Ensure test environment before settings are first read
os.environ.setdefault("ENVIRONMENT", "test")

from voucher_order.core import container as container_module  # noqa: E402
from voucher_order.core.container import DependencyContainer  # noqa: E402
from voucher_order.database.async_db import get_async_db  # noqa: E402
from voucher_order.domains.customer.domain import Customer, CustomerType  # noqa: E402
from voucher_order.domains.order.domain import Order, OrderItem  # noqa: E402
from voucher_order.domains.voucher.domain import (  # noqa: E402
    FixedAmountVoucher,
    PercentDiscountVoucher,
)

FIXED_NOW = datetime(2024, 5, 17, 9, 30, tzinfo=UTC)


# ============================================================================
# SESSION / RESULT HELPERS
# ============================================================================


def make_result(rows: list[dict[str, Any]] | None = None, rowcount: int = 1, scalar: Any = None) -> MagicMock:
    """Build a mock of a SQLAlchemy Result for text() statements."""
    rows = rows or []
    result = MagicMock()
    result.rowcount = rowcount
    result.mappings.return_value.first.return_value = rows[0] if rows else None
    result.mappings.return_value.all.return_value = rows
    result.scalar_one.return_value = scalar
    return result


@pytest.fixture
def result_factory():
    """Factory for mock Result objects (see make_result)."""
    return make_result


@pytest.fixture
def mock_async_session():
    """Create a mock async database session."""
    session = AsyncMock(spec=AsyncSession)
    session.execute = AsyncMock(return_value=make_result())
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    return session


# ============================================================================
# REPOSITORY FIXTURES
# ============================================================================


@pytest.fixture
def mock_customer_repository():
    """Create a mock customer repository."""
    repo = AsyncMock()
    repo.find_by_id = AsyncMock(return_value=None)
    repo.find_by_email = AsyncMock(return_value=None)
    repo.find_all = AsyncMock(return_value=[])
    repo.update_by_id = AsyncMock(return_value=1)
    repo.delete_by_id = AsyncMock(return_value=1)
    return repo


@pytest.fixture
def mock_voucher_repository():
    """Create a mock voucher repository."""
    repo = AsyncMock()
    repo.find_by_id = AsyncMock(return_value=None)
    repo.find_all = AsyncMock(return_value=[])
    repo.update_by_id = AsyncMock(return_value=1)
    repo.update_customer_id = AsyncMock(return_value=1)
    repo.delete_by_id = AsyncMock(return_value=1)
    return repo


@pytest.fixture
def mock_order_repository():
    """Create a mock order repository."""
    repo = AsyncMock()
    repo.find_by_id = AsyncMock(return_value=None)
    repo.find_by_customer_id = AsyncMock(return_value=[])
    repo.update_by_id = AsyncMock(return_value=1)
    repo.delete_by_id = AsyncMock(return_value=1)
    return repo


# ============================================================================
# TEST DATA FIXTURES
# ============================================================================


@pytest.fixture
def sample_customer() -> Customer:
    return Customer(name="park", email="park@example.com", created_at=FIXED_NOW, updated_at=FIXED_NOW)


@pytest.fixture
def blacklisted_customer() -> Customer:
    return Customer(
        name="kim",
        email="kim@example.com",
        customer_type=CustomerType.BLACKLIST,
        created_at=FIXED_NOW,
        updated_at=FIXED_NOW,
    )


@pytest.fixture
def fixed_voucher() -> FixedAmountVoucher:
    return FixedAmountVoucher(discount_value=100, created_at=FIXED_NOW, updated_at=FIXED_NOW)


@pytest.fixture
def percent_voucher() -> PercentDiscountVoucher:
    return PercentDiscountVoucher(discount_value=10, created_at=FIXED_NOW, updated_at=FIXED_NOW)


@pytest.fixture
def product_id() -> UUID:
    return uuid4()


@pytest.fixture
def sample_order(sample_customer, product_id) -> Order:
    return Order(
        customer_id=sample_customer.id,
        order_items=[OrderItem(product_id=product_id, product_price=100, quantity=1)],
        created_at=FIXED_NOW,
        updated_at=FIXED_NOW,
    )


# ============================================================================
# API CLIENT FIXTURES
# ============================================================================


class MockRepositoryContainer(DependencyContainer):
    """Container wiring the real use cases to mock repositories."""

    def __init__(self, customer_repository, voucher_repository, order_repository):
        super().__init__()
        self._customer_repository = customer_repository
        self._voucher_repository = voucher_repository
        self._order_repository = order_repository

    def create_customer_repository(self, db):
        return self._customer_repository

    def create_voucher_repository(self, db):
        return self._voucher_repository

    def create_order_repository(self, db):
        return self._order_repository


@pytest.fixture
def fastapi_app(monkeypatch, mock_customer_repository, mock_voucher_repository, mock_order_repository):
    """FastAPI application whose use cases run against the mock repositories."""
    from voucher_order.core.app_factory import create_app

    monkeypatch.setattr(
        container_module,
        "_container",
        MockRepositoryContainer(mock_customer_repository, mock_voucher_repository, mock_order_repository),
    )

    async def override_get_async_db() -> AsyncGenerator[AsyncSession, None]:
        yield AsyncMock(spec=AsyncSession)

    app = create_app()
    app.dependency_overrides[get_async_db] = override_get_async_db
    return app


@pytest.fixture
def api_client(fastapi_app) -> TestClient:
    """Create FastAPI test client (lifespan is not run)."""
    return TestClient(fastapi_app, raise_server_exceptions=False)
