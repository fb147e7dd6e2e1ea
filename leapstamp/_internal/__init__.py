"""Internal utilities for leapstamp.

This module contains private implementation details:
    - Precision and display constants
    - The decimal context shared by all Timespan arithmetic

Note: This module is not part of the public API.
"""

from __future__ import annotations

from leapstamp._internal.constants import (
    DEFAULT_MAX_PREC,
    DEFAULT_SECS_WIDTH,
    TIMESPAN_CONTEXT,
)

__all__: list[str] = [
    "DEFAULT_MAX_PREC",
    "DEFAULT_SECS_WIDTH",
    "TIMESPAN_CONTEXT",
]
