"""
Order Item Value Object
"""

from dataclasses import dataclass
from uuid import UUID

from voucher_order.core.domain import ValidationException, ValueObject


@dataclass(frozen=True)
class OrderItem(ValueObject):
    """A product line of an order: unit price times quantity."""

    product_id: UUID
    product_price: int
    quantity: int

    def _validate(self) -> None:
        if self.product_price < 0:
            raise ValidationException("Product price cannot be negative", field="product_price")
        if self.quantity <= 0:
            raise ValidationException("Quantity must be greater than zero", field="quantity")

    @property
    def subtotal(self) -> int:
        return self.product_price * self.quantity
