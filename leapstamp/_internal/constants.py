"""Internal constants for leapstamp.

These constants configure the precise-real arithmetic behind Timespan and
the defaults used when rendering timestamps. This module is not part of
the public API.
"""

from __future__ import annotations

import decimal

# Significant digits carried by every Timespan operation. 64 digits keeps
# sub-attosecond resolution on spans the size of the age of the universe.
TIMESPAN_PRECISION: int = 64

# Rounding used by arithmetic and by round_to_prec
TIMESPAN_ROUNDING: str = decimal.ROUND_HALF_EVEN

# Rounding used when the fixed-point renderer drops digits
DISPLAY_ROUNDING: str = decimal.ROUND_DOWN

# Display defaults
DEFAULT_MAX_PREC: int = 9
DEFAULT_SECS_WIDTH: int = 1

# Fractional digits are padded out to a multiple of this (milli/micro/nano)
FRACTION_GROUP: int = 3

LEAP_SUFFIX_FORMAT: str = " (+{} leap)"

# Private context passed explicitly to every decimal operation, so the
# caller's thread-local context never changes a result.
TIMESPAN_CONTEXT: decimal.Context = decimal.Context(
    prec=TIMESPAN_PRECISION,
    rounding=TIMESPAN_ROUNDING,
    Emin=decimal.MIN_EMIN,
    Emax=decimal.MAX_EMAX,
    traps=[decimal.InvalidOperation, decimal.DivisionByZero, decimal.Overflow],
)


__all__ = [
    "TIMESPAN_PRECISION",
    "TIMESPAN_ROUNDING",
    "DISPLAY_ROUNDING",
    "DEFAULT_MAX_PREC",
    "DEFAULT_SECS_WIDTH",
    "FRACTION_GROUP",
    "LEAP_SUFFIX_FORMAT",
    "TIMESPAN_CONTEXT",
]
