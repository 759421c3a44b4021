"""
Voucher Type Value Object

Discriminator stored in the `vouchers.type` column.
"""

from voucher_order.core.domain import StatusEnum


class VoucherType(StatusEnum):
    """Kinds of voucher and how their `discount_value` is read."""

    FIXED_AMOUNT = "FIXED_AMOUNT"  # discount_value is an amount
    PERCENT = "PERCENT"  # discount_value is a percentage in (0, 100]
