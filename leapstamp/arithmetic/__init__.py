"""Comparison operations for timestamps.

This module provides the three-way comparison every Timestamp ordering is
derived from, and explicit helpers built on it.

Functions:
    compare: Three-way comparison returning an Ordering
    equal, not_equal, less_than, less_equal, greater_than, greater_equal
    earliest, latest: min/max consistent with compare
"""

from __future__ import annotations

from leapstamp.arithmetic.comparisons import (
    Ordering,
    compare,
    earliest,
    equal,
    greater_equal,
    greater_than,
    latest,
    less_equal,
    less_than,
    not_equal,
)

__all__: list[str] = [
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
