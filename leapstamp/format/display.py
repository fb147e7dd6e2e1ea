"""Fixed-precision rendering of timestamps.

Functions:
    ts_show: Render a Timestamp as seconds with grouped fractional digits.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from leapstamp._internal.constants import (
    DEFAULT_MAX_PREC,
    DEFAULT_SECS_WIDTH,
    FRACTION_GROUP,
    LEAP_SUFFIX_FORMAT,
)
from leapstamp.core.timespan import to_fixed

if TYPE_CHECKING:
    from leapstamp.core.timestamp import Timestamp


def _pad_fraction(digits: str) -> str:
    # Round the length up to the next multiple of FRACTION_GROUP
    width = -(-len(digits) // FRACTION_GROUP) * FRACTION_GROUP
    return digits.ljust(width, "0")


def ts_show(
    ts: Timestamp,
    max_prec: int = DEFAULT_MAX_PREC,
    secs_width: int = DEFAULT_SECS_WIDTH,
) -> str:
    """Render a timestamp as a fixed-point number of seconds.

    The leap-exclusive ``since`` is rendered with at most ``max_prec``
    fractional digits (extra digits are truncated). The integer digits are
    zero-padded to ``secs_width`` and the fraction is padded with zeros to
    a whole number of three-digit groups. A timestamp inside a leap second
    gets a ``" (+N leap)"`` suffix.

    Args:
        ts: The timestamp to render.
        max_prec: Maximum number of fractional digits.
        secs_width: Minimum number of integer digits.

    Returns:
        The rendered string.

    Raises:
        decimal.InvalidOperation: If ``max_prec`` needs more digits than
            the library precision carries.

    Examples:
        >>> from leapstamp.core.timestamp import timestamp
        >>> ts_show(timestamp(5, 0.25))
        '5.250'
        >>> ts_show(timestamp(7), secs_width=2)
        '07'
        >>> ts_show(timestamp(59, 0.5, leap_adjust=1))
        '59.500 (+1 leap)'
    """
    text = to_fixed(ts.since, max_prec)

    sign = ""
    if text.startswith("-"):
        sign, text = "-", text[1:]

    whole, _, fraction = text.partition(".")
    result = sign + whole.rjust(secs_width, "0")
    if fraction:
        result += "." + _pad_fraction(fraction)

    if ts.leap_adjust != 0:
        result += LEAP_SUFFIX_FORMAT.format(ts.leap_adjust)
    return result


__all__ = ["ts_show"]
