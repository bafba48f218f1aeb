import logging

from .breakdown import CalendarBreakdown, MultiScaleBreakdown, breakdown, breakdown_all
from .clock import SYSTEM_CLOCK, Clock, FixedClock, SystemClock
from .errors import UnsupportedUnit
from .instant import Instant, to_instant
from .pretty import pretty_breakdown
from .ticks import UNITS, Unit, count_ticks
from .util import CENTURY, DAY, DECADE, EPOCH, HOUR, MILLENNIUM, MINUTE, SECOND, WEEK

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "count_ticks",
    "breakdown",
    "breakdown_all",
    "pretty_breakdown",
    "CalendarBreakdown",
    "MultiScaleBreakdown",
    "Unit",
    "UNITS",
    "UnsupportedUnit",
    "Instant",
    "to_instant",
    "Clock",
    "SystemClock",
    "FixedClock",
    "SYSTEM_CLOCK",
    "EPOCH",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
    "DECADE",
    "CENTURY",
    "MILLENNIUM",
]
