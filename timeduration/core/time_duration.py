"""TimeDuration class representing an exact span of time.

This module provides the TimeDuration class: a signed, bounded count of
nanoseconds with exact arithmetic and rounding. It is the value that
elapsed-time and duration-balancing code works in before converting
back to calendar units.
"""

from __future__ import annotations

import logging
from typing import ClassVar

from timeduration._internal.constants import (
    MAX_TIME_DURATION_NS,
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from timeduration._internal.integer import sign as sign_of, trunc_divmod
from timeduration._internal.validation import (
    is_safe_integer,
    to_integer,
    validate_nonzero,
    validate_rounding_increment,
    validate_safe_integer,
    validate_subseconds,
    validate_time_duration_range,
)
from timeduration.errors import InvalidArgumentError, RangeExceededError
from timeduration.units.rounding_mode import RoundingMode
from timeduration.units.timeunit import TimeUnit

logger = logging.getLogger(__name__)


class TimeDuration:
    """A signed span of time with nanosecond precision.

    TimeDuration holds a single exact integer count of nanoseconds whose
    magnitude never exceeds MAX (9007199254740991.999999999 seconds).
    Whole seconds and the nanoseconds within the second are derived
    from it and always share its sign.

    Instances are immutable. Every operation returns a new TimeDuration
    or a plain number.

    Attributes:
        total_ns: The exact nanosecond count.
        seconds: Whole seconds, truncated toward zero (a safe integer).
        subseconds: Nanoseconds within the second, in [-999999999, 999999999].

    Examples:
        >>> d = TimeDuration.normalize(1, 1, 1, 1, 1, 1, 1)
        >>> d.seconds, d.subseconds
        (90061, 1001001)

        >>> d = TimeDuration.from_seconds(3661, 1001001)
        >>> d.subtract(TimeDuration.from_seconds(86400, 0))
        TimeDuration(seconds=-82738, subseconds=-998998999)

        >>> TimeDuration(1_500).round(1_000, RoundingMode.HALF_EVEN).total_ns
        2000
    """

    __slots__ = ("_total_ns",)

    MAX: ClassVar[int] = MAX_TIME_DURATION_NS
    ZERO: ClassVar[TimeDuration]

    def __init__(self, total_ns: int = 0) -> None:
        """Create a TimeDuration from a nanosecond count.

        Args:
            total_ns: Signed number of nanoseconds. Integral floats,
                Fractions and Decimals are accepted and converted exactly.

        Raises:
            InvalidArgumentError: If total_ns is not integral.
            RangeExceededError: If |total_ns| exceeds MAX.

        Examples:
            >>> TimeDuration(1_000_000_001)
            TimeDuration(seconds=1, subseconds=1)
        """
        value = to_integer(total_ns, "total_ns")
        validate_time_duration_range(value, "duration time units")
        object.__setattr__(self, "_total_ns", value)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __copy__(self) -> TimeDuration:
        return self

    def __deepcopy__(self, memo: object) -> TimeDuration:
        return self

    def __reduce__(self) -> tuple[type[TimeDuration], tuple[int]]:
        return (TimeDuration, (self._total_ns,))

    @classmethod
    def _from_valid_ns(cls, total_ns: int) -> TimeDuration:
        """Build an instance from an int already known to be in range."""
        instance = object.__new__(cls)
        object.__setattr__(instance, "_total_ns", total_ns)
        return instance

    @classmethod
    def from_seconds(cls, seconds: int, subseconds: int) -> TimeDuration:
        """Create a TimeDuration from whole seconds and subsecond nanoseconds.

        Args:
            seconds: Whole seconds; must be a safe integer.
            subseconds: Nanoseconds within the second, in
                [-999999999, 999999999].

        Returns:
            A TimeDuration of seconds * 1e9 + subseconds nanoseconds.

        Raises:
            InvalidArgumentError: If either value is not a safe integer,
                if |subseconds| is a second or more, or if both are
                nonzero with different signs.

        Examples:
            >>> TimeDuration.from_seconds(-0.0, -0.0).seconds
            0
        """
        sec = validate_safe_integer(seconds, "seconds")
        subsec = validate_safe_integer(subseconds, "subseconds")
        validate_subseconds(sec, subsec)
        return cls._from_valid_ns(sec * NANOS_PER_SECOND + subsec)

    @classmethod
    def normalize(
        cls,
        days: int,
        hours: int,
        minutes: int,
        seconds: int,
        milliseconds: int,
        microseconds: int,
        nanoseconds: int,
    ) -> TimeDuration:
        """Fold calendar-granular time components into one TimeDuration.

        Each component may be any size and sign; the sum is computed
        exactly before the range check.

        Returns:
            A TimeDuration of the total.

        Raises:
            InvalidArgumentError: If any component is not integral.
            RangeExceededError: If the total exceeds MAX.

        Examples:
            >>> d = TimeDuration.normalize(0, 0, 0, 0, 1234567890, 1234567890, 1234567890)
            >>> d.seconds, d.subseconds
            (1235803, 692457890)
        """
        total_ns = (
            to_integer(nanoseconds, "nanoseconds")
            + to_integer(microseconds, "microseconds") * NANOS_PER_MICROSECOND
            + to_integer(milliseconds, "milliseconds") * NANOS_PER_MILLISECOND
            + to_integer(seconds, "seconds") * NANOS_PER_SECOND
            + to_integer(minutes, "minutes") * NANOS_PER_MINUTE
            + to_integer(hours, "hours") * NANOS_PER_HOUR
            + to_integer(days, "days") * NANOS_PER_DAY
        )
        validate_time_duration_range(total_ns, "total of duration time units")
        return cls._from_valid_ns(total_ns)

    @classmethod
    def from_epoch_ns_diff(cls, epoch_ns1: int, epoch_ns2: int) -> TimeDuration:
        """Create the TimeDuration from epoch_ns2 to epoch_ns1.

        Args:
            epoch_ns1: Later (or minuend) timestamp in epoch nanoseconds.
            epoch_ns2: Earlier (or subtrahend) timestamp in epoch nanoseconds.

        Returns:
            A TimeDuration of epoch_ns1 - epoch_ns2.

        Raises:
            InvalidArgumentError: If either timestamp is not integral.
            RangeExceededError: If the difference exceeds MAX.
        """
        diff = to_integer(epoch_ns1, "epoch_ns1") - to_integer(epoch_ns2, "epoch_ns2")
        validate_time_duration_range(diff, "difference of epoch nanoseconds")
        return cls._from_valid_ns(diff)

    @property
    def total_ns(self) -> int:
        """Return the exact nanosecond count."""
        return self._total_ns

    @property
    def seconds(self) -> int:
        """Return whole seconds, truncated toward zero."""
        return trunc_divmod(self._total_ns, NANOS_PER_SECOND)[0]

    @property
    def subseconds(self) -> int:
        """Return nanoseconds within the second, with the sign of the duration."""
        return trunc_divmod(self._total_ns, NANOS_PER_SECOND)[1]

    subsecond_nanoseconds = subseconds

    def add(self, other: TimeDuration) -> TimeDuration:
        """Return the exact sum of two durations.

        Raises:
            InvalidArgumentError: If other is not a TimeDuration.
            RangeExceededError: If the sum exceeds MAX.
        """
        total_ns = self._total_ns + _require_time_duration(other)._total_ns
        validate_time_duration_range(total_ns, "sum of duration time units")
        return TimeDuration._from_valid_ns(total_ns)

    def subtract(self, other: TimeDuration) -> TimeDuration:
        """Return the exact difference self - other.

        Raises:
            InvalidArgumentError: If other is not a TimeDuration.
            RangeExceededError: If the difference exceeds MAX.
        """
        total_ns = self._total_ns - _require_time_duration(other)._total_ns
        validate_time_duration_range(total_ns, "difference of duration time units")
        return TimeDuration._from_valid_ns(total_ns)

    def abs(self) -> TimeDuration:
        """Return the absolute value. Never out of range."""
        if self._total_ns >= 0:
            return self
        return TimeDuration._from_valid_ns(-self._total_ns)

    def negate(self) -> TimeDuration:
        """Return the additive inverse. Never out of range."""
        return TimeDuration._from_valid_ns(-self._total_ns)

    def sign(self) -> int:
        """Return -1, 0 or 1."""
        return sign_of(self._total_ns)

    def is_zero(self) -> bool:
        """Return True if this duration is exactly zero."""
        return self._total_ns == 0

    def cmp(self, other: TimeDuration) -> int:
        """Compare with another duration.

        Returns:
            -1 if self is shorter (more negative), 1 if longer, 0 if equal.

        Raises:
            InvalidArgumentError: If other is not a TimeDuration.
        """
        return sign_of(self._total_ns - _require_time_duration(other)._total_ns)

    def add_to_epoch_ns(self, epoch_ns: int) -> int:
        """Return the epoch nanosecond timestamp shifted by this duration.

        No range check is applied; the caller owns the timestamp domain.

        Raises:
            InvalidArgumentError: If epoch_ns is not integral.
        """
        return to_integer(epoch_ns, "epoch_ns") + self._total_ns

    def divmod(self, n: int) -> tuple[int, TimeDuration]:
        """Divide by an integer, truncating toward zero.

        Args:
            n: Nonzero divisor, typically the nanosecond length of a unit.

        Returns:
            Tuple of (quotient, remainder) where the remainder is a
            TimeDuration with the sign of self (or zero) and magnitude
            less than |n|.

        Raises:
            InvalidArgumentError: If n is zero or not integral.
            RangeExceededError: If the quotient is not a safe integer.

        Examples:
            >>> q, r = TimeDuration.from_seconds(90061, 333666999).divmod(1000)
            >>> q, r.seconds, r.subseconds
            (90061333666, 0, 999)
        """
        divisor = to_integer(n, "divisor")
        validate_nonzero(divisor, "divisor")
        quotient, remainder = trunc_divmod(self._total_ns, divisor)
        if not is_safe_integer(quotient):
            logger.debug("divmod quotient out of range: %d", quotient)
            raise RangeExceededError(
                f"quotient {quotient} of duration division is not a safe integer"
            )
        return quotient, TimeDuration._from_valid_ns(remainder)

    def div(self, n: int) -> float:
        """Divide by an integer, returning an approximate float.

        The integer part is exact; the fractional part comes from a float
        division of the remainder. Use for display only.

        Examples:
            >>> TimeDuration(1_500_000_000).div(1_000_000_000)
            1.5
        """
        divisor = to_integer(n, "divisor")
        quotient, remainder = self.divmod(divisor)
        return quotient + remainder._total_ns / divisor

    def total(self, unit: TimeUnit | str) -> float:
        """Return this duration as an approximate count of unit."""
        return self.div(TimeUnit.parse(unit).nanoseconds)

    def round(
        self,
        increment: int,
        mode: RoundingMode | str = RoundingMode.HALF_EXPAND,
    ) -> TimeDuration:
        """Round to a multiple of increment nanoseconds.

        Args:
            increment: Positive rounding step in nanoseconds.
            mode: Rounding policy, as a RoundingMode or its string value.

        Returns:
            The rounded duration; self if already a multiple.

        Raises:
            InvalidArgumentError: If increment is not integral or mode is
                unknown.
            RangeExceededError: If increment is below 1 or the rounded
                value exceeds MAX.

        Examples:
            >>> TimeDuration(2_500).round(1_000, "halfEven").total_ns
            2000
            >>> TimeDuration(-2_500).round(1_000, "halfExpand").total_ns
            -3000
        """
        increment = validate_rounding_increment(increment)
        mode = RoundingMode.parse(mode)
        if increment == 1:
            return self
        quotient, remainder = trunc_divmod(self._total_ns, increment)
        if remainder == 0:
            return self
        direction = -1 if remainder < 0 else 1
        # Compare 2r against the increment to find ties without dividing
        tiebreaker = abs(2 * remainder)
        tie = tiebreaker == increment
        expand_is_nearer = tiebreaker > increment
        if mode.should_expand(direction, tie, expand_is_nearer, quotient % 2 != 0):
            quotient += direction
        rounded = quotient * increment
        validate_time_duration_range(rounded, "rounded duration time units")
        return TimeDuration._from_valid_ns(rounded)

    def round_to(
        self,
        unit: TimeUnit | str,
        increment: int = 1,
        mode: RoundingMode | str = RoundingMode.HALF_EXPAND,
    ) -> TimeDuration:
        """Round to a multiple of increment units.

        The increment is validated against the unit: it must evenly divide
        the next larger unit (e.g. 15 minutes, not 7).

        Examples:
            >>> TimeDuration.normalize(0, 0, 7, 30, 0, 0, 0).round_to("minute", 15)
            TimeDuration(seconds=900, subseconds=0)
        """
        unit = TimeUnit.parse(unit)
        increment = unit.validate_increment(increment)
        return self.round(unit.nanoseconds * increment, mode)

    def __add__(self, other: object) -> TimeDuration:
        if not isinstance(other, TimeDuration):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> TimeDuration:
        if not isinstance(other, TimeDuration):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> TimeDuration:
        return self.negate()

    def __pos__(self) -> TimeDuration:
        return self

    def __abs__(self) -> TimeDuration:
        return self.abs()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeDuration):
            return NotImplemented
        return self._total_ns == other._total_ns

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TimeDuration):
            return NotImplemented
        return self._total_ns < other._total_ns

    def __le__(self, other: object) -> bool:
        if not isinstance(other, TimeDuration):
            return NotImplemented
        return self._total_ns <= other._total_ns

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, TimeDuration):
            return NotImplemented
        return self._total_ns > other._total_ns

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, TimeDuration):
            return NotImplemented
        return self._total_ns >= other._total_ns

    def __hash__(self) -> int:
        return hash(self._total_ns)

    def __bool__(self) -> bool:
        return self._total_ns != 0

    def __repr__(self) -> str:
        sec, subsec = trunc_divmod(self._total_ns, NANOS_PER_SECOND)
        return f"TimeDuration(seconds={sec}, subseconds={subsec})"

    def __str__(self) -> str:
        """Return the duration in seconds, like "-90061.001001001 s"."""
        sec, subsec = trunc_divmod(abs(self._total_ns), NANOS_PER_SECOND)
        text = f"{'-' if self._total_ns < 0 else ''}{sec}"
        if subsec:
            text += f".{subsec:09d}".rstrip("0")
        return f"{text} s"


def _require_time_duration(value: object) -> TimeDuration:
    if not isinstance(value, TimeDuration):
        raise InvalidArgumentError(
            f"expected a TimeDuration, got {type(value).__name__}"
        )
    return value


TimeDuration.ZERO = TimeDuration._from_valid_ns(0)


__all__ = ["TimeDuration"]
