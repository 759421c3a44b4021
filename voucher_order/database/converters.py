"""
Conversions applied at the query boundary.

UUIDs travel to and from the database as 16 raw bytes.
"""

from datetime import UTC, date, datetime, time, timedelta
from uuid import UUID


def uuid_to_bin(value: UUID | None) -> bytes | None:
    """UUID -> 16 bytes (None passes through)."""
    if value is None:
        return None
    return value.bytes


def bin_to_uuid(value: bytes | memoryview | None) -> UUID | None:
    """16 bytes -> UUID (None passes through)."""
    if value is None:
        return None
    return UUID(bytes=bytes(value))


def as_utc(value: datetime | None) -> datetime | None:
    """Attach UTC to naive datetimes returned by drivers without tz support."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def day_bounds(day: date) -> tuple[datetime, datetime]:
    """Half-open UTC interval [start, end) covering `day`."""
    start = datetime.combine(day, time.min, tzinfo=UTC)
    return start, start + timedelta(days=1)
