"""Comparison operations for timestamps.

This module provides the single ordering function that every Timestamp
comparison is derived from, plus explicit helper functions.

Comparison Rules:
    - ``since`` (the leap-exclusive span) is compared first.
    - Only when ``since`` is equal is ``leap_adjust`` compared.
    - The leap-inclusive sums are never compared directly: two timestamps
      with equal ``since`` and different ``leap_adjust`` are distinct
      instants, one of them inside a leap second.

Supported Operations:
    - compare: Three-way comparison returning an Ordering
    - equal, not_equal, less_than, less_equal, greater_than, greater_equal
    - earliest, latest: min/max consistent with compare
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from leapstamp.core.timestamp import Timestamp


class Ordering(Enum):
    """Result of a three-way comparison.

    Examples:
        >>> Ordering.LT.value
        -1
    """

    LT = -1
    EQ = 0
    GT = 1


def _check_operands(left: object, right: object) -> None:
    from leapstamp.core.timestamp import Timestamp

    if not isinstance(left, Timestamp) or not isinstance(right, Timestamp):
        raise TypeError(
            f"cannot compare {type(left).__name__} with {type(right).__name__}"
        )


def compare(i: Timestamp, j: Timestamp) -> Ordering:
    """Three-way comparison of two timestamps.

    Args:
        i: First timestamp.
        j: Second timestamp.

    Returns:
        Ordering.LT, Ordering.EQ or Ordering.GT.

    Raises:
        TypeError: If either operand is not a Timestamp.

    Examples:
        >>> from leapstamp.core.timestamp import timestamp
        >>> compare(timestamp(59), timestamp(59, leap_adjust=1))
        <Ordering.LT: -1>
        >>> compare(timestamp(60), timestamp(59, leap_adjust=1))
        <Ordering.GT: 1>
    """
    _check_operands(i, j)

    if i.since < j.since:
        return Ordering.LT
    if i.since > j.since:
        return Ordering.GT
    if i.leap_adjust < j.leap_adjust:
        return Ordering.LT
    if i.leap_adjust > j.leap_adjust:
        return Ordering.GT
    return Ordering.EQ


def equal(left: Timestamp, right: Timestamp) -> bool:
    """Test if two timestamps denote the same instant."""
    return compare(left, right) is Ordering.EQ


def not_equal(left: Timestamp, right: Timestamp) -> bool:
    """Test if two timestamps denote different instants."""
    return compare(left, right) is not Ordering.EQ


def less_than(left: Timestamp, right: Timestamp) -> bool:
    """Test if left is earlier than right."""
    return compare(left, right) is Ordering.LT


def less_equal(left: Timestamp, right: Timestamp) -> bool:
    """Test if left is earlier than or the same as right."""
    return compare(left, right) is not Ordering.GT


def greater_than(left: Timestamp, right: Timestamp) -> bool:
    """Test if left is later than right."""
    return compare(left, right) is Ordering.GT


def greater_equal(left: Timestamp, right: Timestamp) -> bool:
    """Test if left is later than or the same as right."""
    return compare(left, right) is not Ordering.LT


def earliest(*timestamps: Timestamp) -> Timestamp:
    """Return the earliest of the given timestamps.

    Ties keep the first argument, so ``earliest(a, b) is a`` exactly when
    ``compare(a, b)`` is not GT.

    Raises:
        ValueError: If no timestamps are given.

    Examples:
        >>> from leapstamp.core.timestamp import timestamp
        >>> earliest(timestamp(2), timestamp(1), timestamp(3))
        Timestamp(since=Decimal('1'), leap_adjust=0)
    """
    if not timestamps:
        raise ValueError("earliest() requires at least one timestamp")

    result = timestamps[0]
    for candidate in timestamps[1:]:
        if compare(result, candidate) is Ordering.GT:
            result = candidate
    return result


def latest(*timestamps: Timestamp) -> Timestamp:
    """Return the latest of the given timestamps.

    Ties keep the first argument, so ``latest(a, b) is a`` exactly when
    ``compare(a, b)`` is not LT.

    Raises:
        ValueError: If no timestamps are given.
    """
    if not timestamps:
        raise ValueError("latest() requires at least one timestamp")

    result = timestamps[0]
    for candidate in timestamps[1:]:
        if compare(result, candidate) is Ordering.LT:
            result = candidate
    return result


__all__ = [
    "Ordering",
    "compare",
    "equal",
    "not_equal",
    "less_than",
    "less_equal",
    "greater_than",
    "greater_equal",
    "earliest",
    "latest",
]
