"""ISO 8601 datetime conversion utilities.

This module centralizes all transformations between Python datetime objects,
epoch-millisecond timestamps and ISO 8601 strings. Stored documents keep
timestamps as ISO strings; these helpers are the only way in and out.
"""

from datetime import datetime, date, UTC


def to_timestamp(dt: datetime) -> str:
    """Convert datetime to ISO 8601 UTC timestamp string."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC).isoformat().replace("+00:00", "Z")


def to_datetime(timestamp: str) -> datetime:
    """Convert ISO 8601 UTC timestamp string to datetime."""
    return datetime.fromisoformat(timestamp.replace('Z', '+00:00'))


def from_epoch_ms(millis: int | float) -> datetime:
    """Convert epoch milliseconds to an aware UTC datetime."""
    return datetime.fromtimestamp(millis / 1000, tz=UTC)


def coerce(value: datetime | date | int | float | str) -> str:
    """Normalize any accepted date representation to an ISO 8601 string.

    Accepts datetimes, dates (midnight UTC), epoch milliseconds and
    ISO 8601 strings.
    """
    if isinstance(value, datetime):
        return to_timestamp(value)
    if isinstance(value, date):
        return to_timestamp(datetime(value.year, value.month, value.day, tzinfo=UTC))
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return to_timestamp(from_epoch_ms(value))
    if isinstance(value, str):
        return to_timestamp(to_datetime(value))
    raise TypeError(f"Cannot convert {type(value).__name__} to timestamp")


def now() -> str:
    """Get current UTC timestamp as ISO 8601 string."""
    return to_timestamp(datetime.now(UTC))
