"""Calendar and multi-scale breakdowns of the time between two instants."""

import calendar
import logging
from dataclasses import asdict, dataclass, fields
from datetime import date, datetime, timedelta

from dateutil.relativedelta import relativedelta

from tdt.clock import SYSTEM_CLOCK, Clock, resolve_end
from tdt.instant import Instant, to_instant
from tdt.util import (
    CENTURY,
    DAY,
    DECADE,
    HOUR,
    MICROSECONDS_PER_MILLISECOND,
    MICROSECONDS_PER_SECOND,
    MILLENNIUM,
    MINUTE,
    MONTHS_PER_YEAR,
    NANOSECONDS_PER_MICROSECOND,
    WEEK,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class CalendarBreakdown:
    """Elapsed time as calendar remainders, coarsest to finest.

    Each field holds what is left at its scale after borrowing from the
    next coarser one. All fields share the sign of the overall delta.
    """

    years: int = 0
    months: int = 0
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    def parts(self) -> list[tuple[str, int]]:
        """Return ``(unit, value)`` pairs ordered from years to seconds."""
        return [(f.name, getattr(self, f.name)) for f in fields(self)]

    def as_dict(self) -> dict[str, int]:
        return asdict(self)

    def __neg__(self) -> "CalendarBreakdown":
        return CalendarBreakdown(**{name: -value for name, value in self.parts()})

    def __str__(self) -> str:
        return (
            f"CalendarBreakdown({self.years}y {self.months}mo {self.days}d "
            f"{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d})"
        )


@dataclass(frozen=True, kw_only=True)
class MultiScaleBreakdown:
    """Elapsed time as independent totals at every scale.

    Unlike ``CalendarBreakdown`` these are not remainders: ``hours`` is the
    total number of whole hours elapsed, ``months`` the total number of
    whole calendar months, and so on.
    """

    millennia: int
    centuries: int
    decades: int
    years: int
    months: int
    weeks: int
    days: int
    hours: int
    minutes: int
    seconds: int
    milliseconds: int
    microseconds: int
    nanoseconds: int

    def as_dict(self) -> dict[str, int]:
        return asdict(self)


def _days_in_month_before(anchor: datetime, steps: int) -> int:
    """Length of the month ``steps`` months before ``anchor``'s month."""
    month = date(anchor.year, anchor.month, 1) - relativedelta(months=steps)
    return calendar.monthrange(month.year, month.month)[1]


def _calendar_diff(start: datetime, end: datetime) -> CalendarBreakdown:
    if end < start:
        return -_calendar_diff(end, start)

    years = end.year - start.year
    months = end.month - start.month
    days = end.day - start.day
    hours = end.hour - start.hour
    minutes = end.minute - start.minute
    seconds = end.second - start.second

    if seconds < 0:
        seconds += 60
        minutes -= 1
    if minutes < 0:
        minutes += 60
        hours -= 1
    if hours < 0:
        hours += 24
        days -= 1

    # Borrow from the month before end's month; keep walking back when the
    # start day is past the end of that month (e.g. Jan 31 -> Mar 1).
    steps = 0
    while days < 0:
        steps += 1
        days += _days_in_month_before(end, steps)
        months -= 1

    if months < 0:
        months += MONTHS_PER_YEAR
        years -= 1

    return CalendarBreakdown(
        years=years,
        months=months,
        days=days,
        hours=hours,
        minutes=minutes,
        seconds=seconds,
    )


def breakdown(
    start: Instant,
    end: Instant | None = None,
    *,
    clock: Clock = SYSTEM_CLOCK,
) -> CalendarBreakdown:
    """
    Break the time from ``start`` to ``end`` into calendar fields.

    Field differences are taken in UTC and borrowed fine to coarse
    (seconds -> minutes -> hours -> days -> months -> years). The day
    borrow uses the real length of the month preceding ``end``'s month, so
    leap Februaries are respected. Sub-second parts are ignored.

    When ``end`` precedes ``start`` the result is the negated breakdown of
    the swapped instants, so every field carries the same sign.

    Args:
        start: Starting instant
        end: Ending instant (default: ``clock.now()``)
        clock: Source of the current instant when ``end`` is omitted

    Example:
        >>> from datetime import datetime, timezone
        >>> breakdown(
        ...     datetime(2024, 1, 15, tzinfo=timezone.utc),
        ...     datetime(2025, 3, 20, 6, tzinfo=timezone.utc),
        ... )
        CalendarBreakdown(years=1, months=2, days=5, hours=6, minutes=0, seconds=0)
    """
    start_dt = to_instant(start, "start")
    end_dt = resolve_end(end, clock)
    result = _calendar_diff(start_dt, end_dt)
    logger.debug("Breakdown %s -> %s: %s", start_dt, end_dt, result)
    return result


def breakdown_all(
    start: Instant,
    end: Instant | None = None,
    *,
    clock: Clock = SYSTEM_CLOCK,
) -> MultiScaleBreakdown:
    """
    Count the whole units elapsed from ``start`` to ``end`` at every scale.

    Years and months come from the calendar breakdown (``months`` is the
    total, years * 12 plus the month remainder) since neither has a fixed
    length. Everything else floor-divides the elapsed microseconds, taken
    once as an exact integer, by a fixed scale; decades, centuries and
    millennia assume 365-day years. Nanoseconds are microseconds * 1000.

    Args:
        start: Starting instant
        end: Ending instant (default: ``clock.now()``)
        clock: Source of the current instant when ``end`` is omitted
    """
    start_dt = to_instant(start, "start")
    end_dt = resolve_end(end, clock)

    total_us = (end_dt - start_dt) // timedelta(microseconds=1)
    calendar_diff = _calendar_diff(start_dt, end_dt)

    return MultiScaleBreakdown(
        millennia=total_us // (MILLENNIUM * MICROSECONDS_PER_SECOND),
        centuries=total_us // (CENTURY * MICROSECONDS_PER_SECOND),
        decades=total_us // (DECADE * MICROSECONDS_PER_SECOND),
        years=calendar_diff.years,
        months=calendar_diff.years * MONTHS_PER_YEAR + calendar_diff.months,
        weeks=total_us // (WEEK * MICROSECONDS_PER_SECOND),
        days=total_us // (DAY * MICROSECONDS_PER_SECOND),
        hours=total_us // (HOUR * MICROSECONDS_PER_SECOND),
        minutes=total_us // (MINUTE * MICROSECONDS_PER_SECOND),
        seconds=total_us // MICROSECONDS_PER_SECOND,
        milliseconds=total_us // MICROSECONDS_PER_MILLISECOND,
        microseconds=total_us,
        nanoseconds=total_us * NANOSECONDS_PER_MICROSECOND,
    )
