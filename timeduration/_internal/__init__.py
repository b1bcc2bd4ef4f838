"""Internal utilities for timeduration.

This module contains private implementation details:
    - Constants and unit lengths
    - Validation helpers
    - Truncating integer division

Note: This module is not part of the public API.
"""

from __future__ import annotations

from timeduration._internal.integer import sign, trunc_divmod
from timeduration._internal.validation import (
    is_safe_integer,
    to_integer,
    validate_nonzero,
    validate_rounding_increment,
    validate_safe_integer,
    validate_subseconds,
    validate_time_duration_range,
)

__all__: list[str] = [
    "is_safe_integer",
    "sign",
    "to_integer",
    "trunc_divmod",
    "validate_nonzero",
    "validate_rounding_increment",
    "validate_safe_integer",
    "validate_subseconds",
    "validate_time_duration_range",
]
