"""Timeduration exception hierarchy.

All timeduration-specific exceptions inherit from TimeDurationError.
"""

from __future__ import annotations


class TimeDurationError(Exception):
    """Base exception for all timeduration errors."""

    pass


class InvalidArgumentError(TimeDurationError, ValueError):
    """A precondition on an input failed.

    Raised for caller errors that should be fixed at the call site
    rather than recovered from.

    Examples:
        - Non-integral nanosecond count
        - Seconds and subseconds with different signs
        - Subseconds magnitude of one second or more
        - Zero divisor
        - Unknown rounding mode or time unit name
    """

    pass


class RangeExceededError(TimeDurationError, ArithmeticError):
    """A computation produced a value outside the representable range.

    Raised when a structurally valid operation overflows. Higher-level
    date arithmetic is expected to surface this to its own caller.

    Examples:
        - Sum of two durations beyond 9007199254740991.999999999 s
        - divmod quotient that is not a safe integer
        - Rounding increment below 1
    """

    pass


__all__ = [
    "TimeDurationError",
    "InvalidArgumentError",
    "RangeExceededError",
]
