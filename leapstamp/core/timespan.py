"""Timespan: a precise real number of abstract seconds.

A Timespan is a decimal.Decimal tagged with a NewType. All arithmetic runs
under the library context in leapstamp._internal.constants, so results do
not depend on the caller's thread-local decimal context.

Floats enter through their shortest round-trip representation, which means
``timespan(0.4)`` is exactly ``Decimal("0.4")`` rather than the nearest
binary double.
"""

from __future__ import annotations

import decimal
from typing import TYPE_CHECKING, NewType, Union

from leapstamp._internal.constants import (
    DISPLAY_ROUNDING,
    TIMESPAN_CONTEXT,
    TIMESPAN_ROUNDING,
)
from leapstamp.errors import DomainError

if TYPE_CHECKING:
    from leapstamp.core.timestamp import Timestamp

Timespan = NewType("Timespan", decimal.Decimal)

# Anything timespan() accepts as a plain number
Real = Union[int, float, decimal.Decimal]


def _to_decimal(value: Real) -> decimal.Decimal:
    """Convert a real number to a finite Decimal without losing digits."""
    if isinstance(value, decimal.Decimal):
        result = value
    elif isinstance(value, int):
        result = decimal.Decimal(value)
    elif isinstance(value, float):
        result = decimal.Decimal(repr(value))
    else:
        raise TypeError(
            f"cannot convert {type(value).__name__!r} to a timespan"
        )

    if not result.is_finite():
        raise DomainError(f"timespan must be a finite real, got {value!r}")
    return result


def timespan(seconds: Union[Real, "Timestamp"], frac: Real = 0.0) -> Timespan:
    """Build a Timespan from seconds and an optional fraction.

    With an integer ``seconds`` and no fraction the result is exactly
    ``seconds``; the fraction is only added when it is non-zero.

    Passing a Timestamp returns its leap-inclusive seconds, the same
    value as ``Timestamp.seconds()``.

    Args:
        seconds: Whole or real seconds, or a Timestamp.
        frac: Fractional seconds added to ``seconds``.

    Returns:
        The Timespan ``seconds + frac``.

    Raises:
        TypeError: If an argument is not a real number.
        DomainError: If an argument is NaN or infinite.

    Examples:
        >>> timespan(5)
        Decimal('5')
        >>> timespan(5, 0.25)
        Decimal('5.25')
        >>> timespan(0.4)
        Decimal('0.4')
    """
    from leapstamp.core.timestamp import Timestamp

    if isinstance(seconds, Timestamp):
        if frac:
            raise TypeError("frac cannot be combined with a Timestamp")
        return seconds.seconds()

    whole = _to_decimal(seconds)
    if frac:
        return Timespan(TIMESPAN_CONTEXT.add(whole, _to_decimal(frac)))
    return Timespan(whole)


def div(x: Real, y: Real, precision: int = 0) -> Timespan:
    """Divide one Timespan by another.

    Args:
        x: Dividend.
        y: Divisor.
        precision: Reserved for per-call precision control; currently
            ignored and the library precision applies.

    Returns:
        The quotient ``x / y``.

    Raises:
        DomainError: If ``y`` is zero.

    Examples:
        >>> div(timespan(1), timespan(4))
        Decimal('0.25')
    """
    divisor = _to_decimal(y)
    if divisor.is_zero():
        raise DomainError("division by zero timespan")
    return Timespan(TIMESPAN_CONTEXT.divide(_to_decimal(x), divisor))


def floor(x: Timespan) -> int:
    """Return the largest integer not greater than ``x``."""
    return int(x.to_integral_value(rounding=decimal.ROUND_FLOOR))


def truncate(x: Timespan) -> int:
    """Return the integer part of ``x``, rounding toward zero."""
    return int(x.to_integral_value(rounding=decimal.ROUND_DOWN))


def fractional_part(x: Timespan) -> Timespan:
    """Return ``x - floor(x)``, which is always in [0, 1).

    Examples:
        >>> fractional_part(timespan(5.25))
        Decimal('0.25')
        >>> fractional_part(timespan(-0.25))
        Decimal('0.75')
    """
    return Timespan(TIMESPAN_CONTEXT.subtract(x, decimal.Decimal(floor(x))))


def _exponent(prec: int) -> decimal.Decimal:
    # 1E-prec, used as a quantize template
    return decimal.Decimal((0, (1,), -prec))


def round_digits(x: Timespan, prec: int) -> Timespan:
    """Round ``x`` to ``prec`` fractional decimal digits.

    Ties round to even. Raises decimal.InvalidOperation when the result
    would need more digits than the library precision.

    Examples:
        >>> round_digits(timespan(1.23456), 3)
        Decimal('1.235')
    """
    return Timespan(
        x.quantize(_exponent(prec), rounding=TIMESPAN_ROUNDING, context=TIMESPAN_CONTEXT)
    )


def to_fixed(x: Timespan, max_prec: int) -> str:
    """Render ``x`` as a fixed-point decimal string.

    At most ``max_prec`` fractional digits are kept (extra digits are
    truncated, not rounded) and trailing fractional zeros are dropped.
    A sign is shown only for negative values; a value that truncates to
    zero is rendered without one.

    Examples:
        >>> to_fixed(timespan(5.25), 9)
        '5.25'
        >>> to_fixed(timespan(-1.23456), 2)
        '-1.23'
        >>> to_fixed(timespan(7), 9)
        '7'
    """
    value: decimal.Decimal = x
    if value.as_tuple().exponent < -max_prec:
        value = value.quantize(
            _exponent(max_prec), rounding=DISPLAY_ROUNDING, context=TIMESPAN_CONTEXT
        )
    if value.is_zero():
        value = value.copy_abs()

    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


timespan0: Timespan = Timespan(decimal.Decimal(0))


__all__ = [
    "Timespan",
    "timespan",
    "timespan0",
    "div",
    "floor",
    "truncate",
    "fractional_part",
    "round_digits",
    "to_fixed",
]
