"""TimeUnit enumeration for exact-length time units.

This module provides the TimeUnit enum representing the units from
nanoseconds to days, each with an exact length in nanoseconds.
"""

from __future__ import annotations

import logging
from enum import Enum

from timeduration._internal.constants import (
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from timeduration._internal.validation import validate_rounding_increment
from timeduration.errors import InvalidArgumentError, RangeExceededError

logger = logging.getLogger(__name__)


class TimeUnit(Enum):
    """Exact-length time units for rounding and totals.

    Months and years have no fixed length and are not represented here.
    A DAY is always 24 hours in this context.

    Examples:
        >>> TimeUnit.HOUR.nanoseconds
        3600000000000

        >>> TimeUnit.parse("minutes")
        <TimeUnit.MINUTE: 'minute'>

        >>> TimeUnit.DAY.maximum_increment is None
        True
    """

    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"
    MILLISECOND = "millisecond"
    MICROSECOND = "microsecond"
    NANOSECOND = "nanosecond"

    @classmethod
    def parse(cls, value: TimeUnit | str) -> TimeUnit:
        """Return the TimeUnit for a member or its singular or plural name.

        Raises:
            InvalidArgumentError: If value names no unit.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = value[:-1] if value.endswith("s") else value
            for unit in cls:
                if unit.value == name:
                    return unit
        raise InvalidArgumentError(f"unknown time unit: {value!r}")

    @property
    def nanoseconds(self) -> int:
        """Return the exact length of one unit in nanoseconds."""
        return _UNIT_NANOS[self]

    @property
    def maximum_increment(self) -> int | None:
        """Return the unit count of the next larger unit, or None for DAY.

        A rounding increment for this unit must evenly divide this value.
        """
        return _MAXIMUM_INCREMENTS[self]

    def validate_increment(self, increment: object) -> int:
        """Validate a rounding increment expressed in this unit.

        Args:
            increment: Number of units per rounding step. Must be smaller
                than maximum_increment.

        Returns:
            The increment as an int.

        Raises:
            InvalidArgumentError: If increment is not integral.
            RangeExceededError: If increment is below 1, is too large for
                this unit, or does not evenly divide maximum_increment.

        Examples:
            >>> TimeUnit.MINUTE.validate_increment(15)
            15
            >>> TimeUnit.MINUTE.validate_increment(7)
            Traceback (most recent call last):
            ...
            RangeExceededError: roundingIncrement 7 does not divide 60 minutes
        """
        result = validate_rounding_increment(increment)
        dividend = self.maximum_increment
        if dividend is None:
            return result
        maximum = dividend - 1
        if result > maximum:
            logger.debug("rounding increment %d over %d for %s", result, maximum, self.value)
            raise RangeExceededError(
                f"roundingIncrement out of range for {self.value}: "
                f"{result} > {maximum}"
            )
        if dividend % result != 0:
            logger.debug("rounding increment %d does not divide %d", result, dividend)
            raise RangeExceededError(
                f"roundingIncrement {result} does not divide {dividend} {self.value}s"
            )
        return result


_UNIT_NANOS: dict[TimeUnit, int] = {
    TimeUnit.DAY: NANOS_PER_DAY,
    TimeUnit.HOUR: NANOS_PER_HOUR,
    TimeUnit.MINUTE: NANOS_PER_MINUTE,
    TimeUnit.SECOND: NANOS_PER_SECOND,
    TimeUnit.MILLISECOND: NANOS_PER_MILLISECOND,
    TimeUnit.MICROSECOND: NANOS_PER_MICROSECOND,
    TimeUnit.NANOSECOND: 1,
}

_MAXIMUM_INCREMENTS: dict[TimeUnit, int | None] = {
    TimeUnit.DAY: None,
    TimeUnit.HOUR: 24,
    TimeUnit.MINUTE: 60,
    TimeUnit.SECOND: 60,
    TimeUnit.MILLISECOND: 1000,
    TimeUnit.MICROSECOND: 1000,
    TimeUnit.NANOSECOND: 1000,
}


__all__ = ["TimeUnit"]
