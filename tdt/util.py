"""Utility constants and defaults for tdt.

Time unit constants represent durations in seconds, matching the values
used by the tick counter and the multi-scale breakdown. Decades, centuries
and millennia are fixed 365-day-year multiples, not calendar-aware spans.
"""

from datetime import datetime, timezone

# Time unit constants (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400
WEEK = 604800
DECADE = 3650 * DAY
CENTURY = 36500 * DAY
MILLENNIUM = 365000 * DAY

# Sub-second scale factors (ticks per second)
MILLISECONDS_PER_SECOND = 1_000
MICROSECONDS_PER_SECOND = 1_000_000
NANOSECONDS_PER_SECOND = 1_000_000_000
MICROSECONDS_PER_MILLISECOND = 1_000
NANOSECONDS_PER_MICROSECOND = 1_000

# Calendar approximations used for fractional year/month tick counts
DAYS_PER_YEAR = 365
DAYS_PER_MONTH = 30
MONTHS_PER_YEAR = 12

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
DEFAULT_UNIT = "seconds"
DEFAULT_MAX_UNITS = 3
