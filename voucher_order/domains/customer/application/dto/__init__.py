"""
Customer Application DTOs

Validated input accepted when changing a customer.
"""

from pydantic import BaseModel, EmailStr, field_validator

from voucher_order.domains.customer.domain.value_objects.customer_type import CustomerType

NAME_MAX_LENGTH = 10
EMAIL_MAX_LENGTH = 50


class CustomerUpdateRequest(BaseModel):
    """
    Replacement values for a customer.

    Every violation is reported against its own field:
    - customer_type: required
    - name: not blank, at most 10 characters
    - email: not blank, an email address, at most 50 characters
    """

    customer_type: CustomerType
    name: str
    email: EmailStr

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Name must not be blank")
        if len(v) > NAME_MAX_LENGTH:
            raise ValueError(f"Name must be at most {NAME_MAX_LENGTH} characters")
        return v

    @field_validator("email", mode="before")
    @classmethod
    def validate_email_presence(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            raise ValueError("Email is required")
        if isinstance(v, str):
            v = v.strip()
            if len(v) > EMAIL_MAX_LENGTH:
                raise ValueError(f"Email must be at most {EMAIL_MAX_LENGTH} characters")
        return v


class CustomerCreateRequest(CustomerUpdateRequest):
    """Same constraints as an update; type defaults to NORMAL."""

    customer_type: CustomerType = CustomerType.NORMAL


__all__ = ["CustomerUpdateRequest", "CustomerCreateRequest"]
