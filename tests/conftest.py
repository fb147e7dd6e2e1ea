"""Pytest configuration and fixtures for leapstamp tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so leapstamp can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def inside_leap():
    """A timestamp 0.4s into a leap second inserted at 1000s."""
    from leapstamp import timestamp

    return timestamp(1000).adjust_leap_seconds(0.4)
