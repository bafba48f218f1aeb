"""Injectable clocks supplying the "now" default for open-ended deltas.

Operations that default ``end`` to the current instant read it from a
``Clock`` passed by the caller, so tests can pin time with ``FixedClock``
instead of patching the system clock.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timezone

from typing_extensions import override

from tdt.instant import Instant, to_instant


class Clock(ABC):
    """Source of the current instant."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current instant as an aware UTC datetime."""
        pass


class SystemClock(Clock):
    """Clock backed by the system wall clock."""

    @override
    def now(self) -> datetime:
        return datetime.now(timezone.utc)


@dataclass(frozen=True)
class FixedClock(Clock):
    """Clock that always reports the same instant."""

    instant: datetime

    def __post_init__(self) -> None:
        object.__setattr__(self, "instant", to_instant(self.instant, "instant"))

    @override
    def now(self) -> datetime:
        return self.instant


SYSTEM_CLOCK: Clock = SystemClock()


def resolve_end(end: Instant | None, clock: Clock) -> datetime:
    """Return ``end`` as a UTC instant, reading ``clock`` when it is omitted."""
    if end is None:
        return clock.now()
    return to_instant(end, "end")
