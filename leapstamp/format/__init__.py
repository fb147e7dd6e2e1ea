"""Timestamp formatting.

Functions:
    ts_show: Render a Timestamp as fixed-point seconds.

Examples:
    >>> from leapstamp import timestamp
    >>> from leapstamp.format import ts_show

    >>> ts_show(timestamp(1, 0.5), secs_width=3)
    '001.500'
"""

from __future__ import annotations

from leapstamp.format.display import ts_show

__all__: list[str] = [
    "ts_show",
]
