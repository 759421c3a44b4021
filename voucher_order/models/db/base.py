"""
Base models and mixins for the database
"""

from datetime import UTC, datetime

from sqlalchemy import Column, DateTime, LargeBinary
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def uuid_column(**kwargs) -> Column:
    """16-byte column holding a UUID in its raw binary form."""
    return Column(LargeBinary(16), **kwargs)


class TimestampMixin:
    """Mixin adding automatic timestamps."""

    # Timezone-aware UTC datetimes, matching the domain entities
    created_at = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        nullable=False,
    )
    updated_at = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
        nullable=False,
    )
