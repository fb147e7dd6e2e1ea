"""Tests for leapstamp package imports.

These tests verify that the package structure is correct and all
modules are importable.
"""

from __future__ import annotations


def test_import_leapstamp() -> None:
    """Import leapstamp package succeeds."""
    import leapstamp

    assert hasattr(leapstamp, "__version__")
    assert leapstamp.__version__ == "0.1.0"


def test_import_core_module() -> None:
    """Import leapstamp.core submodule succeeds."""
    from leapstamp import core

    assert hasattr(core, "__all__")


def test_import_arithmetic_module() -> None:
    """Import leapstamp.arithmetic submodule succeeds."""
    from leapstamp import arithmetic

    assert hasattr(arithmetic, "__all__")


def test_import_format_module() -> None:
    """Import leapstamp.format submodule succeeds."""
    from leapstamp import format  # noqa: A004

    assert hasattr(format, "__all__")


def test_import_internal_module() -> None:
    """Import leapstamp._internal submodule succeeds."""
    from leapstamp import _internal

    assert hasattr(_internal, "__all__")


def test_public_names_exist() -> None:
    """Every name in leapstamp.__all__ is defined."""
    import leapstamp

    for name in leapstamp.__all__:
        assert hasattr(leapstamp, name), name


def test_set_log_level() -> None:
    """set_log_level raises the package logger level."""
    import logging

    import leapstamp

    logger = logging.getLogger("leapstamp")
    previous = logger.level
    try:
        leapstamp.set_log_level("DEBUG")
        assert logger.level == logging.DEBUG
    finally:
        logger.setLevel(previous)


def test_all_names_public_operations() -> None:
    """The top-level package exports every constructor and operation."""
    import leapstamp

    expected = {
        "timespan",
        "timespan0",
        "timestamp",
        "timestamp0",
        "div",
        "seconds",
        "unadjusted_seconds",
        "leap_adjust",
        "round_to_prec",
        "adjust_leap_seconds",
        "calendar_seconds",
        "compare",
        "ts_show",
    }
    assert expected <= set(leapstamp.__all__)


def test_top_level_names_are_submodule_objects() -> None:
    """Top-level re-exports are the same objects as in their submodules."""
    import leapstamp
    from leapstamp.arithmetic.comparisons import compare
    from leapstamp.core.timestamp import Timestamp, timestamp
    from leapstamp.format.display import ts_show

    assert leapstamp.Timestamp is Timestamp
    assert leapstamp.timestamp is timestamp
    assert leapstamp.compare is compare
    assert leapstamp.ts_show is ts_show


def test_timespan_is_decimal() -> None:
    """Timespans are plain decimal.Decimal values at runtime."""
    import decimal

    import leapstamp

    assert isinstance(leapstamp.timespan(1), decimal.Decimal)
    assert leapstamp.timestamp0.since == leapstamp.timespan0
