"""
Base Value Object Classes for Domain-Driven Design

Value Objects are immutable domain primitives that have no identity.
They are compared by their values, not by reference.
"""

from abc import ABC
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Self

from email_validator import EmailNotValidError, validate_email

from voucher_order.core.domain.exceptions import ValidationException


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for all value objects.

    Value objects are:
    - Immutable (frozen=True)
    - Compared by value (dataclass equality)
    - Have no identity
    """

    def __post_init__(self):
        """Override to add validation logic."""
        self._validate()

    def _validate(self) -> None:
        """Validate the value object. Override in subclasses."""
        pass


@dataclass(frozen=True)
class Email(ValueObject):
    """
    Email address value object.

    Validates length and syntax (email-validator, the same check behind
    pydantic EmailStr) and strips surrounding whitespace.
    """

    address: str

    MAX_LENGTH: ClassVar[int] = 50

    def _validate(self) -> None:
        address = (self.address or "").strip()
        if not address:
            raise ValidationException("Email is required", field="email")
        if len(address) > self.MAX_LENGTH:
            raise ValidationException(f"Email must be at most {self.MAX_LENGTH} characters", field="email")
        try:
            validate_email(address, check_deliverability=False)
        except EmailNotValidError as e:
            raise ValidationException(f"Invalid email address: {address}", field="email") from e
        object.__setattr__(self, "address", address)

    def __str__(self) -> str:
        return self.address


@dataclass(frozen=True)
class PersonName(ValueObject):
    """Customer display name: non-blank and short."""

    value: str

    MAX_LENGTH: ClassVar[int] = 10

    def _validate(self) -> None:
        if not self.value or not self.value.strip():
            raise ValidationException("Name must not be blank", field="name")
        if len(self.value) > self.MAX_LENGTH:
            raise ValidationException(f"Name must be at most {self.MAX_LENGTH} characters", field="name")

    def __str__(self) -> str:
        return self.value


class StatusEnum(str, Enum):
    """
    Base class for status enums.

    Provides common functionality for all status value objects.
    """

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Create from string value (case-insensitive)."""
        for member in cls:
            if member.value.lower() == value.lower():
                return member
        raise ValidationException(f"Invalid {cls.__name__}: {value}")
