"""Coercion of caller-supplied values into UTC instants.

Every operation in tdt works on timezone-aware ``datetime`` objects in UTC,
so calendar fields (year, month, day, ...) are read consistently no matter
which zone the caller's values were expressed in.
"""

import logging
from datetime import date, datetime, time, timezone
from typing import Any, TypeAlias

from dateutil.parser import isoparse

logger = logging.getLogger(__name__)

Instant: TypeAlias = datetime | date | int | float | str


def to_instant(value: Any, name: str = "instant") -> datetime:
    """Convert ``value`` to a timezone-aware ``datetime`` in UTC.

    Accepts:
    - datetime: Must be timezone-aware, converted to UTC
    - date: Midnight UTC of that day
    - int/float: Unix timestamp in seconds
    - str: ISO-8601 text; no UTC offset means UTC

    Raises:
        TypeError: If value is an unsupported type or naive datetime
        ValueError: If a string is not valid ISO-8601
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            raise TypeError(
                f"{name} must be a timezone-aware datetime.\n"
                f"Got naive datetime: {value!r}\n"
                f"Hint: Add timezone info:\n"
                f"  dt = datetime(..., tzinfo=timezone.utc)"
            )
        return value.astimezone(timezone.utc)
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=timezone.utc)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value, tz=timezone.utc)
    if isinstance(value, str):
        parsed = isoparse(value)
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        logger.debug("Parsed %s %r as %s", name, value, parsed.isoformat())
        return parsed.astimezone(timezone.utc)
    raise TypeError(
        f"{name} must be datetime, date, int, float, or str.\n"
        f"Got {type(value).__name__!r}: {value!r}\n"
        f"Examples:\n"
        f"  datetime(2025, 1, 1, tzinfo=timezone.utc)  # aware datetime\n"
        f"  date(2025, 1, 1)  # midnight UTC\n"
        f"  1735689600  # Unix seconds\n"
        f"  \"2025-01-01T00:00:00Z\"  # ISO-8601"
    )
