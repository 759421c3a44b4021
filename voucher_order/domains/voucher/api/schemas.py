"""
Voucher API Schemas

Pydantic schemas for API request/response validation.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from voucher_order.domains.voucher.domain.value_objects.voucher_type import VoucherType


class VoucherCreateRequest(BaseModel):
    """Voucher creation schema. Range checks per type happen in the entity."""

    voucher_type: VoucherType
    discount_value: int = Field(..., gt=0, description="Amount for FIXED_AMOUNT, percent for PERCENT")
    customer_id: UUID | None = None


class VoucherUpdateRequest(BaseModel):
    """Voucher update schema."""

    voucher_type: VoucherType
    discount_value: int = Field(..., gt=0)


class VoucherAssignRequest(BaseModel):
    """Owner to assign; null releases the voucher."""

    customer_id: UUID | None = None


class VoucherResponse(BaseModel):
    """Voucher response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    voucher_type: VoucherType
    discount_value: int
    customer_id: UUID | None = None
    created_at: datetime
    updated_at: datetime


class DeletedResponse(BaseModel):
    """Number of rows removed by a bulk delete."""

    deleted: int


__all__ = [
    "VoucherCreateRequest",
    "VoucherUpdateRequest",
    "VoucherAssignRequest",
    "VoucherResponse",
    "DeletedResponse",
]
