"""
Base Entity Classes for Domain-Driven Design

Entities are domain objects with identity and lifecycle.
They maintain their identity regardless of their attributes.
"""

from abc import ABC
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Generic, TypeVar
from uuid import UUID, uuid4

# Type variable for entity ID (UUID for every aggregate in this service)
TId = TypeVar("TId")


def utc_now() -> datetime:
    """Current timezone-aware UTC time."""
    return datetime.now(UTC)


@dataclass(eq=False)
class Entity(ABC, Generic[TId]):
    """
    Base class for all domain entities.

    An entity is a domain object that has a distinct identity
    that runs through time and different states.

    Subclasses must give every field a default because the base
    fields below already have defaults.

    Example:
        ```python
        @dataclass(eq=False)
        class Voucher(Entity[UUID]):
            discount_value: int = 0

            def discount(self, amount: int) -> int:
                ...
        ```
    """

    id: TId = field(default_factory=uuid4)  # type: ignore[assignment]
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    def __eq__(self, other: object) -> bool:
        """Entities are equal if they are the same kind and have the same ID."""
        if not isinstance(other, Entity):
            return False
        return type(self) is type(other) and self.id == other.id

    def __hash__(self) -> int:
        """Hash based on ID for use in sets and dicts."""
        return hash(self.id)

    def touch(self) -> None:
        """Update the updated_at timestamp."""
        self.updated_at = utc_now()


# Helper functions for ID generation
def generate_uuid() -> UUID:
    """Generate a new UUID for entity identification."""
    return uuid4()
