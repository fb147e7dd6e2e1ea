"""leapstamp: leap-second-aware timestamps over precise reals.

leapstamp is the layer beneath calendar and duration types. It stores time
since an epoch as a precise decimal Timespan, plus an explicit count of the
leap seconds an instant is currently inside, so a non-monotonic scale such
as UTC can be ordered and displayed correctly.

Core Types:
    Timespan: Precise real number of abstract seconds
    Timestamp: Leap-exclusive Timespan paired with a leap adjustment

Constructors and Constants:
    timespan, timestamp, timespan0, timestamp0

Operations:
    seconds, unadjusted_seconds, leap_adjust, round_to_prec,
    adjust_leap_seconds, calendar_seconds, div

Comparison:
    Ordering, compare, earliest, latest

Format Functions:
    ts_show: Render a Timestamp as fixed-point seconds

Exceptions:
    LeapstampError: Base exception
    DomainError: Operation with no finite real result

Example:
    >>> from leapstamp import timestamp, ts_show
    >>> ts = timestamp(1_000_000, 0.25).adjust_leap_seconds(0.5)
    >>> ts_show(ts)
    '999999.750 (+1 leap)'
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from leapstamp.core.timespan import Timespan, div, timespan, timespan0
from leapstamp.core.timestamp import (
    Timestamp,
    adjust_leap_seconds,
    calendar_seconds,
    leap_adjust,
    round_to_prec,
    seconds,
    timestamp,
    timestamp0,
    unadjusted_seconds,
)

# Comparison
from leapstamp.arithmetic.comparisons import Ordering, compare, earliest, latest

# Exceptions
from leapstamp.errors import DomainError, LeapstampError

# Format functions
from leapstamp.format import ts_show

logging.getLogger(__name__).addHandler(logging.NullHandler())


def set_log_level(level: int | str = "INFO") -> None:
    """Enable leapstamp logging.

    This calls logging.basicConfig() for convenience in scripts; in
    general configure logging yourself and only raise the level of the
    ``leapstamp`` logger.

    Args:
        level: A level accepted by ``logging.Logger.setLevel``.

    Raises:
        ValueError: If ``level`` is an unknown level name.
    """
    logging.basicConfig(level=level, format="%(asctime)s [%(levelname)s] %(message)s")
    logging.getLogger(__name__).setLevel(level)


__all__: list[str] = [
    "__version__",
    # Core types
    "Timespan",
    "Timestamp",
    # Constructors and constants
    "timespan",
    "timespan0",
    "timestamp",
    "timestamp0",
    # Operations
    "div",
    "seconds",
    "unadjusted_seconds",
    "leap_adjust",
    "round_to_prec",
    "adjust_leap_seconds",
    "calendar_seconds",
    # Comparison
    "Ordering",
    "compare",
    "earliest",
    "latest",
    # Exceptions
    "LeapstampError",
    "DomainError",
    # Format functions
    "ts_show",
    "set_log_level",
]
