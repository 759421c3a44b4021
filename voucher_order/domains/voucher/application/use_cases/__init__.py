"""
Voucher Use Cases

Each use case represents a single business operation.
"""

from .create_voucher import CreateVoucherRequest, CreateVoucherUseCase
from .delete_voucher import DeleteVoucherUseCase, RevokeCustomerVouchersUseCase
from .get_vouchers import GetVoucherUseCase, ListVouchersRequest, ListVouchersUseCase
from .update_voucher import (
    AssignVoucherRequest,
    AssignVoucherUseCase,
    UpdateVoucherRequest,
    UpdateVoucherUseCase,
)

__all__ = [
    "CreateVoucherUseCase",
    "CreateVoucherRequest",
    "GetVoucherUseCase",
    "ListVouchersUseCase",
    "ListVouchersRequest",
    "UpdateVoucherUseCase",
    "UpdateVoucherRequest",
    "AssignVoucherUseCase",
    "AssignVoucherRequest",
    "DeleteVoucherUseCase",
    "RevokeCustomerVouchersUseCase",
]
