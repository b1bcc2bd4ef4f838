"""Validation utilities for timeduration.

This module provides the checks that guard construction and arithmetic:
integral inputs, safe integers, subsecond bounds, and the overall
duration range. Each check raises at the point of detection.

This module is not part of the public API.
"""

from __future__ import annotations

import logging
import math
import numbers
from decimal import Decimal

from timeduration._internal.constants import (
    MAX_SAFE_INTEGER,
    MAX_SUBSECONDS,
    MAX_TIME_DURATION_NS,
    MAX_TIME_DURATION_TEXT,
)
from timeduration.errors import InvalidArgumentError, RangeExceededError

logger = logging.getLogger(__name__)


def to_integer(value: object, name: str) -> int:
    """Convert an integral value to int without losing precision.

    Accepts ints, integral floats, Fractions with a denominator of 1 and
    integral finite Decimals. Booleans are rejected even though they are
    ints, since passing one is almost always a mistake.

    Args:
        value: The value to convert.
        name: Parameter name used in the error message.

    Returns:
        The exact integer value.

    Raises:
        InvalidArgumentError: If value is not an integral number.

    Examples:
        >>> to_integer(5.0, "seconds")
        5
        >>> to_integer(-0.0, "seconds")
        0
    """
    if isinstance(value, bool):
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, numbers.Rational) and value.denominator == 1:
        return int(value.numerator)
    if (
        isinstance(value, Decimal)
        and value.is_finite()
        and value == value.to_integral_value()
    ):
        return int(value)
    raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")


def is_safe_integer(value: int) -> bool:
    """Return True if value is representable exactly as a float64 integer."""
    return -MAX_SAFE_INTEGER <= value <= MAX_SAFE_INTEGER


def validate_safe_integer(value: object, name: str) -> int:
    """Validate that value is a safe integer and return it as an int.

    Raises:
        InvalidArgumentError: If value is not integral or its magnitude
            exceeds 2**53 - 1.
    """
    result = to_integer(value, name)
    if not is_safe_integer(result):
        raise InvalidArgumentError(
            f"{name} must be a safe integer, got {result}"
        )
    return result


def validate_subseconds(seconds: int, subseconds: int) -> None:
    """Validate a seconds/subseconds pair.

    Args:
        seconds: Whole seconds.
        subseconds: Nanoseconds within the second.

    Raises:
        InvalidArgumentError: If |subseconds| is one second or more, or if
            both are nonzero with different signs.
    """
    if abs(subseconds) > MAX_SUBSECONDS:
        raise InvalidArgumentError(
            f"subseconds must be between {-MAX_SUBSECONDS} and {MAX_SUBSECONDS}, "
            f"got {subseconds}"
        )
    if seconds and subseconds and (seconds < 0) != (subseconds < 0):
        raise InvalidArgumentError(
            f"seconds and subseconds must have the same sign, "
            f"got {seconds} and {subseconds}"
        )


def validate_nonzero(value: int, name: str) -> None:
    """Validate that a divisor is not zero.

    Raises:
        InvalidArgumentError: If value is zero.
    """
    if value == 0:
        raise InvalidArgumentError(f"{name} must not be zero")


def validate_time_duration_range(total_ns: int, what: str) -> int:
    """Validate that a nanosecond total fits in a time duration.

    Args:
        total_ns: The candidate nanosecond count.
        what: Description of the quantity, used as the message prefix
            (e.g. "sum of duration time units").

    Returns:
        total_ns unchanged.

    Raises:
        RangeExceededError: If |total_ns| exceeds 9007199254740991.999999999 s.
    """
    if abs(total_ns) > MAX_TIME_DURATION_NS:
        logger.debug("%s out of range: %d ns", what, total_ns)
        raise RangeExceededError(
            f"{what} cannot exceed {MAX_TIME_DURATION_TEXT}"
        )
    return total_ns


def _is_infinite(value: object) -> bool:
    if isinstance(value, float):
        return math.isinf(value)
    if isinstance(value, Decimal):
        return value.is_infinite()
    return False


def validate_rounding_increment(increment: object) -> int:
    """Validate a rounding increment and return it as an int.

    Infinite and non-positive increments are range errors; fractional
    increments are argument errors.

    Raises:
        RangeExceededError: If increment is infinite or less than 1.
        InvalidArgumentError: If increment is not integral.
    """
    if _is_infinite(increment):
        logger.debug("rounding increment out of range: %r", increment)
        raise RangeExceededError(f"roundingIncrement out of range: {increment}")
    result = to_integer(increment, "roundingIncrement")
    if result < 1:
        logger.debug("rounding increment out of range: %d", result)
        raise RangeExceededError(f"roundingIncrement out of range: {result}")
    return result


__all__ = [
    "to_integer",
    "is_safe_integer",
    "validate_safe_integer",
    "validate_subseconds",
    "validate_nonzero",
    "validate_time_duration_range",
    "validate_rounding_increment",
]
