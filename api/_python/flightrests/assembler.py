"""
Turn distributed units into assigned rest periods.

Slots are laid out back to back from the start of the rounded rest window,
breaks are dropped and the remaining rest periods are handed out round-robin.
"""

from collections.abc import Sequence
from datetime import datetime

from .types import UNIT_LENGTH_SECONDS, AssignedRestPeriod, CrewRole, RestInterval, RestSlot, Slot
from .units import units_to_timedelta


def create_rest_plan_intervals(
    slots: Sequence[Slot], start: datetime, unit_length: int = UNIT_LENGTH_SECONDS
) -> list[tuple[Slot, RestInterval]]:
    """
    Lay slots out as contiguous intervals.

    Each interval starts where the previous one ended; the first starts at
    start (the rounded window start).
    """
    intervals = []
    cursor = start
    for slot in slots:
        end = cursor + units_to_timedelta(slot.units, unit_length)
        intervals.append((slot, RestInterval(start=cursor, end=end)))
        cursor = end
    return intervals


def assign_owners_remove_breaks(
    intervals: Sequence[tuple[Slot, RestInterval]],
    number_of_users: int,
    crew_role: CrewRole,
) -> list[AssignedRestPeriod]:
    """Drop break intervals and assign rest intervals to users 1..n in turn."""
    rest_intervals = [interval for slot, interval in intervals if isinstance(slot, RestSlot)]

    return [
        AssignedRestPeriod(owner=index % number_of_users + 1, period=interval, crew_role=crew_role)
        for index, interval in enumerate(rest_intervals)
    ]
