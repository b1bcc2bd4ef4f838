"""Exact integer helpers for timeduration.

Python's ``divmod`` floors toward negative infinity. Duration math needs
truncating division, where the remainder takes the sign of the dividend.

This module is not part of the public API.
"""

from __future__ import annotations


def trunc_divmod(dividend: int, divisor: int) -> tuple[int, int]:
    """Divide, truncating toward zero.

    Args:
        dividend: The number to divide.
        divisor: A nonzero divisor.

    Returns:
        Tuple of (quotient, remainder) with
        ``quotient * divisor + remainder == dividend`` and the remainder
        either zero or of the same sign as the dividend.

    Examples:
        >>> trunc_divmod(7, 2)
        (3, 1)
        >>> trunc_divmod(-7, 2)
        (-3, -1)
        >>> divmod(-7, 2)  # floored, for comparison
        (-4, 1)
    """
    quotient, remainder = divmod(abs(dividend), abs(divisor))
    if (dividend < 0) != (divisor < 0):
        quotient = -quotient
    if dividend < 0:
        remainder = -remainder
    return quotient, remainder


def sign(value: int) -> int:
    """Return -1, 0 or 1 according to the sign of value."""
    return (value > 0) - (value < 0)


__all__ = [
    "trunc_divmod",
    "sign",
]
