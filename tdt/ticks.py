"""Scalar tick counts between two instants."""

import logging
import math
from typing import Literal, TypeAlias

from tdt.clock import SYSTEM_CLOCK, Clock, resolve_end
from tdt.errors import UnsupportedUnit
from tdt.instant import Instant, to_instant
from tdt.util import (
    DAY,
    DAYS_PER_MONTH,
    DAYS_PER_YEAR,
    DEFAULT_UNIT,
    EPOCH,
    HOUR,
    MICROSECONDS_PER_SECOND,
    MILLISECONDS_PER_SECOND,
    MINUTE,
    MONTHS_PER_YEAR,
    NANOSECONDS_PER_SECOND,
    SECOND,
)

logger = logging.getLogger(__name__)

Unit: TypeAlias = Literal[
    "years",
    "months",
    "days",
    "hours",
    "minutes",
    "seconds",
    "milliseconds",
    "microseconds",
    "nanoseconds",
]

UNITS: tuple[Unit, ...] = (
    "years",
    "months",
    "days",
    "hours",
    "minutes",
    "seconds",
    "milliseconds",
    "microseconds",
    "nanoseconds",
)

# Units coarser than a second divide the elapsed seconds...
_DIVISORS = {
    "days": DAY,
    "hours": HOUR,
    "minutes": MINUTE,
    "seconds": SECOND,
}

# ...finer ones multiply them.
_MULTIPLIERS = {
    "milliseconds": MILLISECONDS_PER_SECOND,
    "microseconds": MICROSECONDS_PER_SECOND,
    "nanoseconds": NANOSECONDS_PER_SECOND,
}


def count_ticks(
    start: Instant | None = None,
    end: Instant | None = None,
    unit: Unit = DEFAULT_UNIT,
    *,
    clock: Clock = SYSTEM_CLOCK,
) -> float | int:
    """
    Count how many ``unit`` ticks elapse from ``start`` to ``end``.

    Years and months are approximated from calendar fields rather than a
    fixed duration, and come back as floats:

        years  = year_diff + month_diff / 12 + day_diff / 365
        months = year_diff * 12 + month_diff + day_diff / 30

    Every other unit floors the elapsed seconds, as a float, scaled to
    that unit, so negative deltas round toward negative infinity. The float
    scaling can land one tick low for sub-second units (1.001 s counts as
    1000 milliseconds); ``breakdown_all`` gives exact integer totals.

    Args:
        start: Starting instant (default: Unix epoch)
        end: Ending instant (default: ``clock.now()``)
        unit: One of ``UNITS`` (default "seconds")
        clock: Source of the current instant when ``end`` is omitted

    Returns:
        Float for "years" and "months", int otherwise

    Raises:
        UnsupportedUnit: If ``unit`` is not one of ``UNITS``

    Example:
        >>> from datetime import datetime, timezone
        >>> start = datetime(2025, 1, 1, tzinfo=timezone.utc)
        >>> end = datetime(2025, 1, 2, 12, tzinfo=timezone.utc)
        >>> count_ticks(start, end, "hours")
        36
    """
    if unit not in UNITS:
        raise UnsupportedUnit(unit, UNITS)

    start_dt = EPOCH if start is None else to_instant(start, "start")
    end_dt = resolve_end(end, clock)
    logger.debug("Counting %s from %s to %s", unit, start_dt, end_dt)

    if unit in ("years", "months"):
        years = end_dt.year - start_dt.year
        months = end_dt.month - start_dt.month
        days = end_dt.day - start_dt.day
        if unit == "years":
            return years + months / MONTHS_PER_YEAR + days / DAYS_PER_YEAR
        return years * MONTHS_PER_YEAR + months + days / DAYS_PER_MONTH

    delta_seconds = (end_dt - start_dt).total_seconds()
    if unit in _DIVISORS:
        return math.floor(delta_seconds / _DIVISORS[unit])
    return math.floor(delta_seconds * _MULTIPLIERS[unit])
