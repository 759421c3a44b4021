"""
Dependency Injection Container.

Wires the SQL repositories to the use cases of the customer, voucher and
order domains. Repositories are bound to a caller-supplied AsyncSession,
so one container serves every request.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from voucher_order.config.settings import Settings, get_settings
from voucher_order.domains.customer.application.use_cases import (
    CreateCustomerUseCase,
    DeleteCustomerUseCase,
    FindBlacklistCustomersUseCase,
    GetCustomerUseCase,
    GetVoucherOwnerUseCase,
    ListCustomersUseCase,
    RecordCustomerLoginUseCase,
    UpdateCustomerUseCase,
)
from voucher_order.domains.customer.infrastructure.repositories import SQLCustomerRepository
from voucher_order.domains.order.application.use_cases import (
    ChangeOrderStatusUseCase,
    CreateOrderUseCase,
    DeleteOrderUseCase,
    GetCustomerOrdersUseCase,
    GetOrderUseCase,
)
from voucher_order.domains.order.infrastructure.repositories import SQLOrderRepository
from voucher_order.domains.voucher.application.use_cases import (
    AssignVoucherUseCase,
    CreateVoucherUseCase,
    DeleteVoucherUseCase,
    GetVoucherUseCase,
    ListVouchersUseCase,
    RevokeCustomerVouchersUseCase,
    UpdateVoucherUseCase,
)
from voucher_order.domains.voucher.infrastructure.repositories import SQLVoucherRepository

logger = logging.getLogger(__name__)


class DependencyContainer:
    """
    Dependency Injection Container.

    Single Responsibility: Create repositories and use cases with their dependencies.
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
        logger.info("DependencyContainer initialized")

    # ==================== REPOSITORIES ====================

    def create_customer_repository(self, db: AsyncSession) -> SQLCustomerRepository:
        return SQLCustomerRepository(session=db)

    def create_voucher_repository(self, db: AsyncSession) -> SQLVoucherRepository:
        return SQLVoucherRepository(session=db)

    def create_order_repository(self, db: AsyncSession) -> SQLOrderRepository:
        return SQLOrderRepository(session=db)

    # ==================== CUSTOMER USE CASES ====================

    def create_create_customer_use_case(self, db: AsyncSession) -> CreateCustomerUseCase:
        return CreateCustomerUseCase(customer_repository=self.create_customer_repository(db))

    def create_get_customer_use_case(self, db: AsyncSession) -> GetCustomerUseCase:
        return GetCustomerUseCase(customer_repository=self.create_customer_repository(db))

    def create_list_customers_use_case(self, db: AsyncSession) -> ListCustomersUseCase:
        return ListCustomersUseCase(customer_repository=self.create_customer_repository(db))

    def create_update_customer_use_case(self, db: AsyncSession) -> UpdateCustomerUseCase:
        return UpdateCustomerUseCase(customer_repository=self.create_customer_repository(db))

    def create_record_customer_login_use_case(self, db: AsyncSession) -> RecordCustomerLoginUseCase:
        return RecordCustomerLoginUseCase(customer_repository=self.create_customer_repository(db))

    def create_delete_customer_use_case(self, db: AsyncSession) -> DeleteCustomerUseCase:
        return DeleteCustomerUseCase(customer_repository=self.create_customer_repository(db))

    def create_find_blacklist_customers_use_case(self, db: AsyncSession) -> FindBlacklistCustomersUseCase:
        return FindBlacklistCustomersUseCase(customer_repository=self.create_customer_repository(db))

    def create_get_voucher_owner_use_case(self, db: AsyncSession) -> GetVoucherOwnerUseCase:
        return GetVoucherOwnerUseCase(customer_repository=self.create_customer_repository(db))

    # ==================== VOUCHER USE CASES ====================

    def create_create_voucher_use_case(self, db: AsyncSession) -> CreateVoucherUseCase:
        return CreateVoucherUseCase(
            voucher_repository=self.create_voucher_repository(db),
            customer_repository=self.create_customer_repository(db),
        )

    def create_get_voucher_use_case(self, db: AsyncSession) -> GetVoucherUseCase:
        return GetVoucherUseCase(voucher_repository=self.create_voucher_repository(db))

    def create_list_vouchers_use_case(self, db: AsyncSession) -> ListVouchersUseCase:
        return ListVouchersUseCase(voucher_repository=self.create_voucher_repository(db))

    def create_update_voucher_use_case(self, db: AsyncSession) -> UpdateVoucherUseCase:
        return UpdateVoucherUseCase(voucher_repository=self.create_voucher_repository(db))

    def create_assign_voucher_use_case(self, db: AsyncSession) -> AssignVoucherUseCase:
        return AssignVoucherUseCase(
            voucher_repository=self.create_voucher_repository(db),
            customer_repository=self.create_customer_repository(db),
        )

    def create_revoke_customer_vouchers_use_case(self, db: AsyncSession) -> RevokeCustomerVouchersUseCase:
        return RevokeCustomerVouchersUseCase(voucher_repository=self.create_voucher_repository(db))

    def create_delete_voucher_use_case(self, db: AsyncSession) -> DeleteVoucherUseCase:
        return DeleteVoucherUseCase(voucher_repository=self.create_voucher_repository(db))

    # ==================== ORDER USE CASES ====================

    def create_create_order_use_case(self, db: AsyncSession) -> CreateOrderUseCase:
        return CreateOrderUseCase(
            order_repository=self.create_order_repository(db),
            voucher_repository=self.create_voucher_repository(db),
        )

    def create_get_order_use_case(self, db: AsyncSession) -> GetOrderUseCase:
        return GetOrderUseCase(order_repository=self.create_order_repository(db))

    def create_get_customer_orders_use_case(self, db: AsyncSession) -> GetCustomerOrdersUseCase:
        return GetCustomerOrdersUseCase(order_repository=self.create_order_repository(db))

    def create_change_order_status_use_case(self, db: AsyncSession) -> ChangeOrderStatusUseCase:
        return ChangeOrderStatusUseCase(order_repository=self.create_order_repository(db))

    def create_delete_order_use_case(self, db: AsyncSession) -> DeleteOrderUseCase:
        return DeleteOrderUseCase(order_repository=self.create_order_repository(db))


_container: DependencyContainer | None = None


def get_container() -> DependencyContainer:
    """
    Get global container instance (singleton).

    Returns:
        DependencyContainer instance
    """
    global _container

    if _container is None:
        logger.info("Initializing global DependencyContainer")
        _container = DependencyContainer()
    return _container


def reset_container() -> None:
    """Reset global container (useful for testing)."""
    global _container
    _container = None
