"""Timestamp class pairing a Timespan with a leap-second adjustment.

This module provides the Timestamp class and the free functions that
calendar layers build on: accessors, rounding, leap-second adjustment and
calendar decomposition.
"""

from __future__ import annotations

import decimal
import logging
from typing import Union

from leapstamp._internal.constants import (
    DEFAULT_MAX_PREC,
    DEFAULT_SECS_WIDTH,
    TIMESPAN_CONTEXT,
)
from leapstamp.arithmetic.comparisons import Ordering, compare
from leapstamp.core.timespan import (
    Real,
    Timespan,
    floor,
    fractional_part,
    round_digits,
    timespan,
    timespan0,
    truncate,
)
from leapstamp.format.display import ts_show

log = logging.getLogger(__name__)

_ONE = decimal.Decimal(1)


def _reject_timestamp(value: object) -> None:
    # timespan() would fold leap_adjust into since and lose the leap second
    if isinstance(value, Timestamp):
        raise TypeError(
            "cannot build a Timestamp from a Timestamp; it would lose leap_adjust"
        )


class Timestamp:
    """Elapsed time since an epoch, with an explicit leap-second offset.

    ``since`` is the time elapsed from the epoch, excluding any leap second
    the instant is currently inside. ``leap_adjust`` counts the extra leap
    seconds the instant sits in beyond the nominal second boundary named by
    ``since``; it is normally 0 or 1 and is not a historical running total.

    The leap-inclusive time is ``since + leap_adjust``. Ordering compares
    ``since`` first and only then ``leap_adjust``, so an instant inside a
    leap second sorts after the nominal second it extends.

    Timestamps are immutable; every operation returns a new value.

    Attributes:
        since: Leap-exclusive elapsed time.
        leap_adjust: Leap seconds the instant is offset into.

    Examples:
        >>> ts = Timestamp(timespan(59), 1)
        >>> ts.seconds()
        Decimal('60')
        >>> ts.unadjusted_seconds()
        Decimal('59')

        >>> Timestamp(timespan(59), 1) > Timestamp(timespan(59))
        True
    """

    __slots__ = ("_since", "_leap_adjust")

    def __init__(self, since: Real = timespan0, leap_adjust: int = 0) -> None:
        """Create a Timestamp from its two fields.

        No validation is performed on ``leap_adjust``; callers keep it
        non-negative.

        Args:
            since: Leap-exclusive elapsed time. Ints and floats are
                converted with timespan().
            leap_adjust: Leap seconds the instant is offset into.

        Raises:
            TypeError: If since is a Timestamp.
        """
        _reject_timestamp(since)
        self._since = timespan(since)
        self._leap_adjust = leap_adjust

    @classmethod
    def from_seconds(
        cls, seconds: Real, frac: Real = 0.0, leap_adjust: int = 0
    ) -> Timestamp:
        """Create a Timestamp from whole seconds and an optional fraction.

        Args:
            seconds: Whole or real seconds since the epoch.
            frac: Fractional seconds added to ``seconds``.
            leap_adjust: Leap seconds the instant is offset into.

        Returns:
            A Timestamp with ``since == timespan(seconds, frac)``.

        Raises:
            TypeError: If seconds is a Timestamp.

        Examples:
            >>> Timestamp.from_seconds(5, 0.25)
            Timestamp(since=Decimal('5.25'), leap_adjust=0)
        """
        _reject_timestamp(seconds)
        return cls(timespan(seconds, frac), leap_adjust)

    @property
    def since(self) -> Timespan:
        """Return the leap-exclusive elapsed time."""
        return self._since

    @property
    def leap_adjust(self) -> int:
        """Return the number of leap seconds the instant is offset into."""
        return self._leap_adjust

    def seconds(self) -> Timespan:
        """Return the leap-inclusive elapsed time, ``since + leap_adjust``."""
        return Timespan(TIMESPAN_CONTEXT.add(self._since, self._leap_adjust))

    def unadjusted_seconds(self) -> Timespan:
        """Return ``since`` verbatim, without the leap adjustment."""
        return self._since

    def round_to_prec(self, prec: int) -> Timestamp:
        """Round ``since`` to ``prec`` fractional decimal digits.

        The leap adjustment is integral and passes through unchanged.

        Args:
            prec: Number of fractional digits to keep.

        Returns:
            A new Timestamp with a rounded ``since``.

        Examples:
            >>> Timestamp.from_seconds(1, 0.23456).round_to_prec(3)
            Timestamp(since=Decimal('1.235'), leap_adjust=0)
        """
        return Timestamp(round_digits(self._since, prec), self._leap_adjust)

    def adjust_leap_seconds(self, leaps: Real) -> Timestamp:
        """Absorb ``leaps`` seconds of inserted leap time.

        Meant to be driven by a calendar layer walking a table of leap
        second insertions in chronological order, one call per insertion.
        The result depends on the order of calls.

        - A non-positive ``leaps`` returns this timestamp unchanged.
        - A sub-second ``leaps`` on a timestamp outside any leap second
          enters one: ``since`` is wound back a full second, moved forward
          by ``leaps``, and ``leap_adjust`` becomes 1.
        - Otherwise whole leap seconds accumulate into ``leap_adjust`` and
          the remaining fraction is added to ``since``.

        Args:
            leaps: Leap time to absorb, in seconds.

        Returns:
            The adjusted Timestamp.

        Examples:
            >>> ts = Timestamp(timespan(100)).adjust_leap_seconds(0.4)
            >>> ts
            Timestamp(since=Decimal('99.4'), leap_adjust=1)
            >>> ts.adjust_leap_seconds(1)
            Timestamp(since=Decimal('99.4'), leap_adjust=2)
        """
        leaps = timespan(leaps)
        if leaps <= 0:
            return self

        if leaps < _ONE and self._leap_adjust == 0:
            log.debug("entering leap second at %s by %s", self._since, leaps)
            rewound = TIMESPAN_CONTEXT.subtract(self._since, _ONE)
            return Timestamp(Timespan(TIMESPAN_CONTEXT.add(rewound, leaps)), 1)

        log.debug(
            "accumulating %s leap seconds into %s (leap_adjust=%d)",
            leaps,
            self._since,
            self._leap_adjust,
        )
        return Timestamp(
            Timespan(TIMESPAN_CONTEXT.add(self._since, fractional_part(leaps))),
            self._leap_adjust + truncate(leaps),
        )

    def calendar_seconds(self) -> tuple[int, Timespan, int]:
        """Split the timestamp for calendar formatting.

        Returns:
            ``(whole, fraction, leap_adjust)`` where ``whole`` is
            ``floor(since)`` and ``fraction`` is in [0, 1) for every sign
            of ``since``.

        Examples:
            >>> Timestamp.from_seconds(5, 0.25).calendar_seconds()
            (5, Decimal('0.25'), 0)
            >>> Timestamp.from_seconds(-0.5).calendar_seconds()
            (-1, Decimal('0.5'), 0)
        """
        return (floor(self._since), fractional_part(self._since), self._leap_adjust)

    def __add__(self, other: object) -> Timestamp:
        """Move the timestamp forward by a Timespan.

        Examples:
            >>> Timestamp(timespan(10), 1) + timespan(5)
            Timestamp(since=Decimal('15'), leap_adjust=1)
        """
        if not isinstance(other, (int, float, decimal.Decimal)):
            return NotImplemented
        since = TIMESPAN_CONTEXT.add(self._since, timespan(other))
        return Timestamp(Timespan(since), self._leap_adjust)

    def __radd__(self, other: object) -> Timestamp:
        """Support Timespan + Timestamp."""
        return self.__add__(other)

    def __sub__(self, other: object) -> Timestamp:
        """Move the timestamp back by a Timespan.

        The difference of two timestamps is not defined here: how many
        leap seconds lie between two instants is a calendar decision.
        Subtract ``unadjusted_seconds()`` or ``seconds()`` explicitly.

        Raises:
            TypeError: If other is a Timestamp.
        """
        if isinstance(other, Timestamp):
            raise TypeError(
                "difference between timestamps is not defined; subtract "
                "unadjusted_seconds() or seconds() explicitly"
            )
        if not isinstance(other, (int, float, decimal.Decimal)):
            return NotImplemented
        since = TIMESPAN_CONTEXT.subtract(self._since, timespan(other))
        return Timestamp(Timespan(since), self._leap_adjust)

    def __eq__(self, other: object) -> bool:
        """Check equality with another timestamp.

        Args:
            other: Object to compare with.

        Returns:
            True if other is a Timestamp with the same since and
            leap_adjust.

        Examples:
            >>> timestamp(59, leap_adjust=1) == timestamp(60)
            False
        """
        if not isinstance(other, Timestamp):
            return NotImplemented
        return compare(self, other) is Ordering.EQ

    def __ne__(self, other: object) -> bool:
        """Check inequality with another timestamp."""
        if not isinstance(other, Timestamp):
            return NotImplemented
        return compare(self, other) is not Ordering.EQ

    def __lt__(self, other: object) -> bool:
        """Check if this timestamp is earlier than another.

        Args:
            other: Another Timestamp to compare with.

        Returns:
            True if this timestamp sorts before other.

        Raises:
            TypeError: If other is not a Timestamp.

        Examples:
            >>> timestamp(59) < timestamp(59, leap_adjust=1)
            True
        """
        if not isinstance(other, Timestamp):
            return NotImplemented
        return compare(self, other) is Ordering.LT

    def __le__(self, other: object) -> bool:
        """Check if this timestamp is earlier than or equal to another."""
        if not isinstance(other, Timestamp):
            return NotImplemented
        return compare(self, other) is not Ordering.GT

    def __gt__(self, other: object) -> bool:
        """Check if this timestamp is later than another."""
        if not isinstance(other, Timestamp):
            return NotImplemented
        return compare(self, other) is Ordering.GT

    def __ge__(self, other: object) -> bool:
        """Check if this timestamp is later than or equal to another."""
        if not isinstance(other, Timestamp):
            return NotImplemented
        return compare(self, other) is not Ordering.LT

    def __hash__(self) -> int:
        """Return a hash for this timestamp.

        Returns:
            Hash of the (since, leap_adjust) pair.
        """
        return hash((self._since, self._leap_adjust))

    def __repr__(self) -> str:
        """Return a detailed string representation.

        Returns:
            String showing both fields.
        """
        return f"Timestamp(since={self._since!r}, leap_adjust={self._leap_adjust})"

    def __str__(self) -> str:
        """Return the timestamp rendered by ts_show with default options."""
        return ts_show(self, DEFAULT_MAX_PREC, DEFAULT_SECS_WIDTH)


def timestamp(
    seconds: Union[Real, Timespan],
    frac: Real = 0.0,
    leap_adjust: int = 0,
) -> Timestamp:
    """Create a Timestamp from a Timespan, whole seconds or real seconds.

    The meaning of the second positional argument depends on the first:

    - ``timestamp(seconds: int, frac=0.0, leap_adjust=0)``
    - ``timestamp(t: Timespan, leap_adjust=0)``
    - ``timestamp(seconds: float, leap_adjust=0)``

    ``leap_adjust`` can always be given by keyword.

    Args:
        seconds: A Timespan, whole seconds or real seconds.
        frac: Fractional seconds added to integer ``seconds``; for a
            Timespan or float, the leap adjustment.
        leap_adjust: Leap seconds the instant is offset into.

    Returns:
        A new Timestamp.

    Raises:
        TypeError: If seconds is a Timestamp, if a fraction is given with
            non-integer seconds, or if the leap adjustment is given twice.

    Examples:
        >>> timestamp(5, 0.25)
        Timestamp(since=Decimal('5.25'), leap_adjust=0)
        >>> timestamp(timespan(59), 1)
        Timestamp(since=Decimal('59'), leap_adjust=1)
        >>> timestamp(59.5, leap_adjust=1)
        Timestamp(since=Decimal('59.5'), leap_adjust=1)
    """
    _reject_timestamp(seconds)
    if isinstance(seconds, int):
        return Timestamp.from_seconds(seconds, frac, leap_adjust)

    # Timespan and real seconds take the leap adjustment second
    if frac and not isinstance(frac, int):
        raise TypeError(
            f"frac requires integer seconds, got {type(seconds).__name__}"
        )
    if frac and leap_adjust:
        raise TypeError("leap_adjust given both positionally and by keyword")
    return Timestamp(timespan(seconds), int(frac) or leap_adjust)


def seconds(ts: Timestamp) -> Timespan:
    """Return the leap-inclusive elapsed time of ``ts``."""
    return ts.seconds()


def unadjusted_seconds(ts: Timestamp) -> Timespan:
    """Return the leap-exclusive elapsed time of ``ts``."""
    return ts.unadjusted_seconds()


def leap_adjust(ts: Timestamp) -> int:
    """Return the leap adjustment of ``ts``."""
    return ts.leap_adjust


def round_to_prec(ts: Timestamp, prec: int) -> Timestamp:
    """Round ``ts.since`` to ``prec`` fractional digits."""
    return ts.round_to_prec(prec)


def adjust_leap_seconds(ts: Timestamp, leaps: Real) -> Timestamp:
    """Absorb ``leaps`` seconds of leap time into ``ts``.

    See Timestamp.adjust_leap_seconds.
    """
    return ts.adjust_leap_seconds(leaps)


def calendar_seconds(ts: Timestamp) -> tuple[int, Timespan, int]:
    """Return ``(floor(since), fraction, leap_adjust)`` for ``ts``."""
    return ts.calendar_seconds()


timestamp0: Timestamp = Timestamp(timespan0, 0)


__all__ = [
    "Timestamp",
    "timestamp",
    "timestamp0",
    "seconds",
    "unadjusted_seconds",
    "leap_adjust",
    "round_to_prec",
    "adjust_leap_seconds",
    "calendar_seconds",
]
