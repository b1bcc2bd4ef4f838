"""Timeduration: exact nanosecond time spans for date/time arithmetic.

Timeduration provides the bounded, signed, nanosecond-precision duration
value that elapsed-time and duration-balancing code is built on, with
exact arithmetic and nine rounding policies.

Core Types:
    TimeDuration: Signed span of time, |value| <= 9007199254740991.999999999 s

Units:
    RoundingMode: ceil, floor, expand, trunc and the five half-* policies
    TimeUnit: Exact-length units from NANOSECOND to DAY

Capability Lookup:
    MethodRecord: Looked-up optional methods of a receiver object
    get_method: Look up one callable attribute

Exceptions:
    TimeDurationError: Base exception
    InvalidArgumentError: Failed precondition on an input
    RangeExceededError: Result outside the representable range

Example:
    >>> from timeduration import TimeDuration
    >>> elapsed = TimeDuration.from_epoch_ns_diff(1_700_000_480_000_000_000, 1_700_000_000_000_000_000)
    >>> elapsed.round_to("minute", 15, "halfExpand")
    TimeDuration(seconds=900, subseconds=0)
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from timeduration.core.time_duration import TimeDuration

# Units
from timeduration.units.rounding_mode import RoundingMode
from timeduration.units.timeunit import TimeUnit

# Capability lookup
from timeduration.methodrecord import MethodRecord, get_method

# Exceptions
from timeduration.errors import (
    InvalidArgumentError,
    RangeExceededError,
    TimeDurationError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "TimeDuration",
    # Units
    "RoundingMode",
    "TimeUnit",
    # Capability lookup
    "MethodRecord",
    "get_method",
    # Exceptions
    "TimeDurationError",
    "InvalidArgumentError",
    "RangeExceededError",
]
