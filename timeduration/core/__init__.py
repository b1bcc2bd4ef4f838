"""Core value types.

This module provides:
    - TimeDuration: Exact signed span of time with nanosecond precision
"""

from __future__ import annotations

from timeduration.core.time_duration import TimeDuration

__all__: list[str] = [
    "TimeDuration",
]
