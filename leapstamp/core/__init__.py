"""Core types.

This module provides the two value types of the library:
    - Timespan: Precise real number of abstract seconds
    - Timestamp: Elapsed time since an epoch with a leap-second adjustment
"""

from __future__ import annotations

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

__all__: list[str] = [
    "Timespan",
    "timespan",
    "timespan0",
    "div",
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
