"""
Order API Schemas

Pydantic schemas for API request/response validation.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from voucher_order.domains.order.domain.entities.order import Order
from voucher_order.domains.order.domain.value_objects import OrderStatus
from voucher_order.domains.voucher.api.schemas import VoucherResponse


class OrderItemSchema(BaseModel):
    """Order line schema."""

    model_config = ConfigDict(from_attributes=True)

    product_id: UUID
    product_price: int = Field(..., ge=0)
    quantity: int = Field(..., ge=1)


class OrderCreateRequest(BaseModel):
    """Create order request schema."""

    customer_id: UUID
    order_items: list[OrderItemSchema] = Field(default_factory=list)
    voucher_id: UUID | None = None


class OrderStatusUpdateRequest(BaseModel):
    order_status: OrderStatus


class OrderResponse(BaseModel):
    """Order response schema with the computed total."""

    id: UUID
    customer_id: UUID
    order_items: list[OrderItemSchema]
    voucher: VoucherResponse | None = None
    order_status: OrderStatus
    total_amount: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, order: Order) -> "OrderResponse":
        return cls(
            id=order.id,
            customer_id=order.customer_id,
            order_items=[OrderItemSchema.model_validate(item) for item in order.order_items],
            voucher=VoucherResponse.model_validate(order.voucher) if order.voucher else None,
            order_status=order.order_status,
            total_amount=order.total_amount(),
            created_at=order.created_at,
            updated_at=order.updated_at,
        )


__all__ = [
    "OrderItemSchema",
    "OrderCreateRequest",
    "OrderStatusUpdateRequest",
    "OrderResponse",
]
