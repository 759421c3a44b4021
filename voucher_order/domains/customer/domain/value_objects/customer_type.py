"""
Customer Type Value Object
"""

from voucher_order.core.domain import StatusEnum


class CustomerType(StatusEnum):
    """Standing of a customer."""

    NORMAL = "NORMAL"
    BLACKLIST = "BLACKLIST"
