"""Rounding modes and time units.

This module provides:
    - RoundingMode: The nine rounding policies (ceil, halfEven, ...)
    - TimeUnit: Exact-length units from NANOSECOND to DAY
"""

from __future__ import annotations

from timeduration.units.rounding_mode import RoundingMode
from timeduration.units.timeunit import TimeUnit

__all__: list[str] = [
    "RoundingMode",
    "TimeUnit",
]
