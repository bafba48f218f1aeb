"""Errors raised by tdt."""

from typing import Any


class UnsupportedUnit(ValueError):
    """Raised when a tick count is requested in a unit tdt does not know."""

    def __init__(self, unit: Any, valid: tuple[str, ...] = ()):
        self.unit: Any = unit
        message = f"Unsupported unit: {unit!r}"
        if valid:
            message += (
                f"\nValid units: {', '.join(valid)}\n"
                f"Example: count_ticks(start, end, unit=\"days\")"
            )
        super().__init__(message)
