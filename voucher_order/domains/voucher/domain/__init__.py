"""
Voucher Domain Layer

- Entities: Voucher and its FixedAmountVoucher / PercentDiscountVoucher variants
- Value Objects: VoucherType
"""

from voucher_order.domains.voucher.domain.entities import (
    FixedAmountVoucher,
    PercentDiscountVoucher,
    Voucher,
    create_voucher,
)
from voucher_order.domains.voucher.domain.value_objects import VoucherType

__all__ = [
    "Voucher",
    "FixedAmountVoucher",
    "PercentDiscountVoucher",
    "create_voucher",
    "VoucherType",
]
