"""
Customer API Schemas

Request bodies reuse the validated DTOs of the application layer.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from voucher_order.domains.customer.application.dto import CustomerCreateRequest, CustomerUpdateRequest
from voucher_order.domains.customer.domain.value_objects.customer_type import CustomerType


class CustomerResponse(BaseModel):
    """Customer response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    email: str
    customer_type: CustomerType
    created_at: datetime
    updated_at: datetime
    last_login_at: datetime | None = None


__all__ = ["CustomerCreateRequest", "CustomerUpdateRequest", "CustomerResponse"]
