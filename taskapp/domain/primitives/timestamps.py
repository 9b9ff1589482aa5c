"""Timestamp helpers.

Documents store timestamps as ISO 8601 strings so that every Store
implementation (in-memory or JSONB) holds the same representation.
Naive datetimes are treated as UTC.
"""

from __future__ import annotations

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def to_iso(value: datetime | None) -> str | None:
    """Serialize a datetime for storage.

    Args:
        value: Datetime to serialize, or None.

    Returns:
        ISO 8601 string in UTC, or None.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat()


def parse_timestamp(value: object) -> datetime | None:
    """Parse a stored timestamp back into an aware datetime.

    Accepts datetimes (as returned by some drivers) and ISO strings.

    Raises:
        TypeError: If the value is neither None, str nor datetime.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        parsed = datetime.fromisoformat(value)
    else:
        raise TypeError(f"Unsupported timestamp value: {value!r}")
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
