"""
Voucher Entities

A voucher reduces a pre-discount amount either by a flat amount or by a
percentage. The two variants share identity, ownership and timestamps and
differ only in validation and in `discount()`.
"""

from abc import abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar
from uuid import UUID

from voucher_order.core.domain import Entity, ValidationException, generate_uuid, utc_now

from ..value_objects.voucher_type import VoucherType


@dataclass(eq=False)
class Voucher(Entity[UUID]):
    """
    Base voucher aggregate.

    Example:
        ```python
        voucher = PercentDiscountVoucher(discount_value=10)
        voucher.discount(1000)  # 900
        ```
    """

    discount_value: int = 0
    customer_id: UUID | None = None

    voucher_type: ClassVar[VoucherType]

    def __post_init__(self):
        """Validate discount magnitude on construction."""
        self._validate_discount_value(self.discount_value)

    @abstractmethod
    def _validate_discount_value(self, value: int) -> None:
        """Raise ValidationException if `value` is not valid for this kind."""

    @abstractmethod
    def _discount(self, before_discount: int) -> int:
        """Variant-specific discount arithmetic."""

    def discount(self, before_discount: int) -> int:
        """
        Apply this voucher to a pre-discount amount.

        Args:
            before_discount: Non-negative amount before discount

        Returns:
            Amount after discount. Not clamped at zero.
        """
        if before_discount < 0:
            raise ValidationException("Amount before discount cannot be negative", field="amount")
        return self._discount(before_discount)

    # Ownership

    def assign_to(self, customer_id: UUID) -> None:
        """Give this voucher to a customer."""
        self.customer_id = customer_id
        self.touch()

    def release(self) -> None:
        """Detach this voucher from its owner."""
        self.customer_id = None
        self.touch()

    def __str__(self) -> str:
        return f"Voucher Id : {self.id} Amount : {self.discount_value} Type : {self.voucher_type.value}"


@dataclass(eq=False)
class FixedAmountVoucher(Voucher):
    """Reduces the amount by `discount_value`."""

    voucher_type: ClassVar[VoucherType] = VoucherType.FIXED_AMOUNT

    def _validate_discount_value(self, value: int) -> None:
        if value <= 0:
            raise ValidationException("Discount amount must be greater than zero", field="discount_value")

    def _discount(self, before_discount: int) -> int:
        return before_discount - self.discount_value


@dataclass(eq=False)
class PercentDiscountVoucher(Voucher):
    """Reduces the amount by `discount_value` percent, truncating."""

    voucher_type: ClassVar[VoucherType] = VoucherType.PERCENT

    MAX_PERCENT: ClassVar[int] = 100

    def _validate_discount_value(self, value: int) -> None:
        if value <= 0:
            raise ValidationException("Percent must be greater than zero", field="discount_value")
        if value > self.MAX_PERCENT:
            raise ValidationException(f"Percent must not exceed {self.MAX_PERCENT}", field="discount_value")

    def _discount(self, before_discount: int) -> int:
        return before_discount - (before_discount * self.discount_value // 100)


_VOUCHER_CLASSES: dict[VoucherType, type[Voucher]] = {
    VoucherType.FIXED_AMOUNT: FixedAmountVoucher,
    VoucherType.PERCENT: PercentDiscountVoucher,
}


def create_voucher(
    voucher_type: VoucherType | str,
    discount_value: int,
    voucher_id: UUID | None = None,
    customer_id: UUID | None = None,
    created_at: datetime | None = None,
    updated_at: datetime | None = None,
) -> Voucher:
    """
    Build the voucher variant matching `voucher_type`.

    Raises:
        ValidationException: unknown type or invalid discount value
    """
    if not isinstance(voucher_type, VoucherType):
        voucher_type = VoucherType.from_string(voucher_type)

    voucher_cls = _VOUCHER_CLASSES[voucher_type]
    now = utc_now()
    return voucher_cls(
        id=voucher_id or generate_uuid(),
        discount_value=discount_value,
        customer_id=customer_id,
        created_at=created_at or now,
        updated_at=updated_at or created_at or now,
    )
