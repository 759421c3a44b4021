"""
Voucher Infrastructure Repositories
"""

from .voucher_repository import SQLVoucherRepository, voucher_from_row
from .voucher_sql import VoucherSql

__all__ = [
    "SQLVoucherRepository",
    "VoucherSql",
    "voucher_from_row",
]
