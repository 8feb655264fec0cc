"""
Rest unit arithmetic.

All rest and break lengths are whole multiples of a fixed unit (300 s).
Interval boundaries are rounded inwards to unit boundaries measured from
the Unix epoch, so the usable window never grows.
"""

from datetime import UTC, datetime, timedelta
from typing import Literal

from .types import UNIT_LENGTH_SECONDS, RestInterval

RoundingRule = Literal["up", "down"]

_EPOCH_UTC = datetime(1970, 1, 1, tzinfo=UTC)
_EPOCH_NAIVE = datetime(1970, 1, 1)


def to_utc(dt: datetime) -> datetime:
    """Convert aware datetimes to UTC; naive datetimes pass through unchanged."""
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(UTC)


def round_datetime(
    dt: datetime, unit_length: int = UNIT_LENGTH_SECONDS, rule: RoundingRule = "up"
) -> datetime:
    """
    Round a datetime to a multiple of unit_length seconds since the epoch.

    Aware datetimes are rounded on the absolute timeline and returned in UTC.

    Args:
        dt: Datetime to round
        unit_length: Rounding precision in seconds
        rule: "up" (ceiling) or "down" (floor)

    Returns:
        Rounded datetime
    """
    epoch = _EPOCH_NAIVE if dt.tzinfo is None else _EPOCH_UTC
    unit = timedelta(seconds=unit_length)
    elapsed = to_utc(dt) - epoch

    if rule == "up":
        units = -((-elapsed) // unit)
    else:
        units = elapsed // unit

    return epoch + units * unit


def round_rest_interval(
    begin: datetime, end: datetime, unit_length: int = UNIT_LENGTH_SECONDS
) -> RestInterval:
    """
    Round begin up and end down to unit boundaries.

    When nothing usable remains the result is a zero-length interval at
    begin, which yields zero units.
    """
    rounded_start = round_datetime(begin, unit_length, "up")
    rounded_end = round_datetime(end, unit_length, "down")

    if rounded_start < rounded_end:
        return RestInterval(start=rounded_start, end=rounded_end)

    start = to_utc(begin)
    return RestInterval(start=start, end=start)


def calculate_total_units(
    rounded_interval: RestInterval, unit_length: int = UNIT_LENGTH_SECONDS
) -> int:
    """Number of whole units in an interval."""
    return rounded_interval.duration // timedelta(seconds=unit_length)


def units_to_timedelta(units: int, unit_length: int = UNIT_LENGTH_SECONDS) -> timedelta:
    """Length of a run of units."""
    return timedelta(seconds=units * unit_length)
