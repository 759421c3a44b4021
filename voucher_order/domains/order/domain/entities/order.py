"""
Order Entity

An order owns its items and may carry one voucher. The total is derived,
never stored.
"""

from dataclasses import dataclass, field
from uuid import UUID

from voucher_order.core.domain import Entity, ValidationException
from voucher_order.domains.voucher.domain.entities.voucher import Voucher

from ..value_objects.order_item import OrderItem
from ..value_objects.order_status import OrderStatus


@dataclass(eq=False)
class Order(Entity[UUID]):
    """
    Order aggregate.

    Example:
        ```python
        order = Order(customer_id=customer.id, order_items=[OrderItem(product_id, 100, 1)])
        order.apply_voucher(PercentDiscountVoucher(discount_value=10))
        order.total_amount()  # 90
        ```
    """

    customer_id: UUID | None = None
    order_items: list[OrderItem] = field(default_factory=list)
    voucher: Voucher | None = None
    order_status: OrderStatus = OrderStatus.ACCEPTED

    def __post_init__(self):
        if self.customer_id is None:
            raise ValidationException("Order requires a customer", field="customer_id")
        if not isinstance(self.order_status, OrderStatus):
            self.order_status = OrderStatus.from_string(self.order_status)

    def total_amount(self) -> int:
        """Sum of item subtotals, discounted by the attached voucher if any."""
        before_discount = sum(item.subtotal for item in self.order_items)
        if self.voucher is None:
            return before_discount
        return self.voucher.discount(before_discount)

    def apply_voucher(self, voucher: Voucher) -> None:
        self.voucher = voucher
        self.touch()

    def change_status(self, order_status: OrderStatus) -> None:
        self.order_status = order_status
        self.touch()

    @property
    def voucher_id(self) -> UUID | None:
        return self.voucher.id if self.voucher else None
