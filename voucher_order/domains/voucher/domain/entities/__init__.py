"""
Voucher Domain Entities
"""

from voucher_order.domains.voucher.domain.entities.voucher import (
    FixedAmountVoucher,
    PercentDiscountVoucher,
    Voucher,
    create_voucher,
)

__all__ = [
    "Voucher",
    "FixedAmountVoucher",
    "PercentDiscountVoucher",
    "create_voucher",
]
