"""RoundingMode enumeration for duration rounding.

This module provides the RoundingMode enum naming the nine rounding
policies supported by TimeDuration.round().
"""

from __future__ import annotations

from enum import Enum

from timeduration.errors import InvalidArgumentError


class RoundingMode(Enum):
    """Direction and tie-breaking policy for rounding.

    The directed modes (CEIL, FLOOR, EXPAND, TRUNC) look only at whether
    there is a remainder. The HALF_* modes round to the nearest multiple
    and differ only in how they break an exact tie.

    Values match the option strings used by date/time APIs, so a mode
    can be given either as a member or as its string.

    Examples:
        >>> RoundingMode.parse("halfEven")
        <RoundingMode.HALF_EVEN: 'halfEven'>

        >>> RoundingMode.HALF_EXPAND.should_expand(1, True, False, False)
        True
    """

    CEIL = "ceil"
    FLOOR = "floor"
    EXPAND = "expand"
    TRUNC = "trunc"
    HALF_CEIL = "halfCeil"
    HALF_FLOOR = "halfFloor"
    HALF_EXPAND = "halfExpand"
    HALF_TRUNC = "halfTrunc"
    HALF_EVEN = "halfEven"

    @classmethod
    def parse(cls, value: RoundingMode | str) -> RoundingMode:
        """Return the RoundingMode for a member or its string value.

        Raises:
            InvalidArgumentError: If value names no rounding mode.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidArgumentError(
                f"unknown rounding mode: {value!r}"
            ) from None

    def should_expand(
        self,
        sign: int,
        tie: bool,
        expand_is_nearer: bool,
        quotient_is_odd: bool,
    ) -> bool:
        """Decide whether a truncated quotient moves one step away from zero.

        Only meaningful when the truncating division left a nonzero
        remainder.

        Args:
            sign: Sign of the remainder, -1 or 1.
            tie: True if the remainder is exactly half the increment.
            expand_is_nearer: True if the remainder is more than half the
                increment.
            quotient_is_odd: True if the truncated quotient is odd.

        Returns:
            True if the quotient should be adjusted by sign.
        """
        if self is RoundingMode.TRUNC:
            return False
        if self is RoundingMode.CEIL:
            return sign > 0
        if self is RoundingMode.FLOOR:
            return sign < 0
        if self is RoundingMode.EXPAND:
            return True
        if expand_is_nearer:
            return True
        if not tie:
            return False
        if self is RoundingMode.HALF_CEIL:
            return sign > 0
        if self is RoundingMode.HALF_FLOOR:
            return sign < 0
        if self is RoundingMode.HALF_EXPAND:
            return True
        if self is RoundingMode.HALF_EVEN:
            return quotient_is_odd
        # HALF_TRUNC: ties go toward zero
        return False


__all__ = ["RoundingMode"]
