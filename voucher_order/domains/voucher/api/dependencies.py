"""
Voucher API Dependencies

FastAPI dependencies for the voucher domain.
"""

from voucher_order.api.dependencies import DbSession
from voucher_order.core.container import get_container
from voucher_order.domains.customer.application.use_cases import GetVoucherOwnerUseCase
from voucher_order.domains.voucher.application.use_cases import (
    AssignVoucherUseCase,
    CreateVoucherUseCase,
    DeleteVoucherUseCase,
    GetVoucherUseCase,
    ListVouchersUseCase,
    RevokeCustomerVouchersUseCase,
    UpdateVoucherUseCase,
)


def get_create_voucher_use_case(db: DbSession) -> CreateVoucherUseCase:
    """Get CreateVoucherUseCase instance with database session."""
    return get_container().create_create_voucher_use_case(db)


def get_get_voucher_use_case(db: DbSession) -> GetVoucherUseCase:
    """Get GetVoucherUseCase instance with database session."""
    return get_container().create_get_voucher_use_case(db)


def get_list_vouchers_use_case(db: DbSession) -> ListVouchersUseCase:
    """Get ListVouchersUseCase instance with database session."""
    return get_container().create_list_vouchers_use_case(db)


def get_update_voucher_use_case(db: DbSession) -> UpdateVoucherUseCase:
    """Get UpdateVoucherUseCase instance with database session."""
    return get_container().create_update_voucher_use_case(db)


def get_assign_voucher_use_case(db: DbSession) -> AssignVoucherUseCase:
    """Get AssignVoucherUseCase instance with database session."""
    return get_container().create_assign_voucher_use_case(db)


def get_revoke_customer_vouchers_use_case(db: DbSession) -> RevokeCustomerVouchersUseCase:
    """Get RevokeCustomerVouchersUseCase instance with database session."""
    return get_container().create_revoke_customer_vouchers_use_case(db)


def get_delete_voucher_use_case(db: DbSession) -> DeleteVoucherUseCase:
    """Get DeleteVoucherUseCase instance with database session."""
    return get_container().create_delete_voucher_use_case(db)


def get_voucher_owner_use_case(db: DbSession) -> GetVoucherOwnerUseCase:
    """Get GetVoucherOwnerUseCase instance with database session."""
    return get_container().create_get_voucher_owner_use_case(db)


__all__ = [
    "get_create_voucher_use_case",
    "get_get_voucher_use_case",
    "get_list_vouchers_use_case",
    "get_update_voucher_use_case",
    "get_assign_voucher_use_case",
    "get_revoke_customer_vouchers_use_case",
    "get_delete_voucher_use_case",
    "get_voucher_owner_use_case",
]
