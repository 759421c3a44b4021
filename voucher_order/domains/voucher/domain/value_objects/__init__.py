from voucher_order.domains.voucher.domain.value_objects.voucher_type import VoucherType

__all__ = ["VoucherType"]
