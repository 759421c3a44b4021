"""
Domain Layer - Core DDD building blocks

This module provides base classes for Domain-Driven Design:
- Entities: Objects with identity and lifecycle
- Value Objects: Immutable objects compared by value
- Exceptions: Domain-specific error handling
"""

from voucher_order.core.domain.entities import (
    Entity,
    generate_uuid,
    utc_now,
)
from voucher_order.core.domain.exceptions import (
    DomainException,
    DuplicateEntityException,
    EntityNotFoundException,
    NoRowsUpdatedException,
    ValidationException,
)
from voucher_order.core.domain.value_objects import (
    Email,
    PersonName,
    StatusEnum,
    ValueObject,
)

__all__ = [
    # Entities
    "Entity",
    "generate_uuid",
    "utc_now",
    # Value Objects
    "ValueObject",
    "Email",
    "PersonName",
    "StatusEnum",
    # Exceptions
    "DomainException",
    "ValidationException",
    "EntityNotFoundException",
    "NoRowsUpdatedException",
    "DuplicateEntityException",
]
