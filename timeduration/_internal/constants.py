"""Internal constants for timeduration.

These constants define the limits and unit lengths used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
NANOS_PER_MICROSECOND: int = 1_000
NANOS_PER_MILLISECOND: int = 1_000_000
NANOS_PER_SECOND: int = 1_000_000_000
NANOS_PER_MINUTE: int = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR: int = 60 * NANOS_PER_MINUTE
NANOS_PER_DAY: int = 24 * NANOS_PER_HOUR  # 86_400_000_000_000

# Largest integer a float64 holds without precision loss
MAX_SAFE_INTEGER: int = 2**53 - 1

MAX_SUBSECONDS: int = NANOS_PER_SECOND - 1

# 9_007_199_254_740_991_999_999_999
MAX_TIME_DURATION_NS: int = MAX_SAFE_INTEGER * NANOS_PER_SECOND + MAX_SUBSECONDS

# Used in range error messages
MAX_TIME_DURATION_TEXT: str = f"{MAX_SAFE_INTEGER}.{MAX_SUBSECONDS} s"


__all__ = [
    "NANOS_PER_MICROSECOND",
    "NANOS_PER_MILLISECOND",
    "NANOS_PER_SECOND",
    "NANOS_PER_MINUTE",
    "NANOS_PER_HOUR",
    "NANOS_PER_DAY",
    "MAX_SAFE_INTEGER",
    "MAX_SUBSECONDS",
    "MAX_TIME_DURATION_NS",
    "MAX_TIME_DURATION_TEXT",
]
