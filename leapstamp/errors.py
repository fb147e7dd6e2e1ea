"""leapstamp exception hierarchy.

All leapstamp-specific exceptions inherit from LeapstampError.
"""

from __future__ import annotations


class LeapstampError(Exception):
    """Base exception for all leapstamp errors."""

    pass


class DomainError(LeapstampError, ArithmeticError):
    """Operation outside the domain of the real numbers.

    Raised when a Timespan operation has no finite real result.

    Examples:
        - Dividing a Timespan by a zero Timespan
        - Building a Timespan from NaN or infinity
    """

    pass


__all__ = [
    "LeapstampError",
    "DomainError",
]
