"""Human-readable summaries of elapsed time."""

from tdt.breakdown import breakdown
from tdt.clock import SYSTEM_CLOCK, Clock
from tdt.instant import Instant
from tdt.util import DEFAULT_MAX_UNITS

# Units eligible for the summary; seconds only appear as a fallback
_SUMMARY_UNITS = ("years", "months", "days", "hours", "minutes")


def _plural(value: int, unit: str) -> str:
    """Render ``value`` with ``unit`` singular only when its magnitude is 1."""
    return f"{value} {unit}" if abs(value) != 1 else f"{value} {unit[:-1]}"


def pretty_breakdown(
    start: Instant,
    end: Instant | None = None,
    max_units: int = DEFAULT_MAX_UNITS,
    *,
    clock: Clock = SYSTEM_CLOCK,
) -> str:
    """
    Describe the time from ``start`` to ``end`` in plain English.

    Lists the non-zero calendar fields from years down to minutes, keeps the
    first ``max_units`` of them and joins them with commas. Seconds are shown
    only when every coarser field is zero.

    Args:
        start: Starting instant
        end: Ending instant (default: ``clock.now()``)
        max_units: Maximum number of units in the result (default 3)
        clock: Source of the current instant when ``end`` is omitted

    Returns:
        A string such as "2 years, 3 months, 1 day", or "0 seconds"

    Raises:
        ValueError: If ``max_units`` is less than 1

    Example:
        >>> from datetime import datetime, timezone
        >>> pretty_breakdown(
        ...     datetime(2023, 1, 1, tzinfo=timezone.utc),
        ...     datetime(2025, 4, 2, 5, tzinfo=timezone.utc),
        ...     max_units=2,
        ... )
        '2 years, 3 months'
    """
    if max_units < 1:
        raise ValueError(
            f"max_units must be at least 1, got {max_units}.\n"
            f"Example: pretty_breakdown(start, end, max_units=2)"
        )

    delta = breakdown(start, end, clock=clock)
    parts = [
        _plural(getattr(delta, unit), unit)
        for unit in _SUMMARY_UNITS
        if getattr(delta, unit)
    ]
    if not parts and delta.seconds:
        parts.append(_plural(delta.seconds, "seconds"))

    return ", ".join(parts[:max_units]) or "0 seconds"
