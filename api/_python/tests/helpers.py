"""
Test helper functions for rest distribution checks.

These functions can be imported by test modules for plan analysis.
"""

import sys
from datetime import datetime, timedelta
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from flightrests.types import AssignedRestPeriod, RestRequest


def make_request(
    begin: datetime,
    duration: timedelta,
    number_of_users: int = 2,
    number_of_periods: int = 2,
    minimum_break_units: int = 1,
    **kwargs,
) -> RestRequest:
    """Build a RestRequest for a window of the given length."""
    return RestRequest(
        begin_datetime=begin,
        end_datetime=begin + duration,
        number_of_users=number_of_users,
        number_of_periods=number_of_periods,
        minimum_break_units=minimum_break_units,
        **kwargs,
    )


def rest_units_of(units: list[int]) -> list[int]:
    """Rest counts (even positions) of an alternating unit sequence."""
    return units[0::2]


def break_units_of(units: list[int]) -> list[int]:
    """Break counts (odd positions) of an alternating unit sequence."""
    return units[1::2]


def user_rest_totals(units: list[int], number_of_users: int) -> list[int]:
    """Total rest units per user when rest periods are handed out in turn."""
    totals = [0] * number_of_users
    for index, rest in enumerate(rest_units_of(units)):
        totals[index % number_of_users] += rest
    return totals


def check_distributed_rest_units(
    units: list[int], number_of_periods: int, total_units: int, number_of_users: int
) -> None:
    """
    Assert a distribution is complete, optimal and fair.

    - Length is one rest per period plus one break per gap
    - No more units are used than available
    - Fewer units are left over than there are breaks (otherwise breaks
      could have been lengthened)
    - Every user rests for the same total
    """
    number_of_breaks = number_of_periods - 1

    assert len(units) == number_of_periods + number_of_breaks

    unused_units = total_units - sum(units)
    assert unused_units >= 0, f"Used more units than available: {units}"
    assert unused_units < number_of_breaks, (
        f"{unused_units} unused units could lengthen breaks, "
        f"{number_of_users} users, {number_of_periods} rest periods"
    )

    totals = user_rest_totals(units, number_of_users)
    assert len(set(totals)) == 1, (
        f"Unfair distribution {totals}, {number_of_users} users, {number_of_periods} rest periods"
    )


def owner_durations_minutes(plan: list[AssignedRestPeriod]) -> dict[int, int]:
    """Total rest minutes per owner."""
    totals: dict[int, int] = {}
    for period in plan:
        minutes = int(period.period.duration.total_seconds() // 60)
        totals[period.owner] = totals.get(period.owner, 0) + minutes
    return totals
