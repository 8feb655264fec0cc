"""
Distribution of rest units across rest periods and breaks.

The distributor works purely in units. Its output alternates rest and break
counts: index 0 and even indices are rest periods, odd indices are breaks.
to_slots() turns that into explicit RestSlot/BreakSlot values for assembly.

Two modes:
- Equal share: users divide the periods evenly, every rest period has the
  same length. Leftover units are dropped, or spread over the breaks when
  break optimisation is on.
- Unequal share: 2 users with an odd number of periods. Periods alternate
  short-long-short so both users rest for the same total; leftovers always
  go to the breaks.
"""

from collections.abc import Sequence

from .feasibility import UNEQUAL_SHARE_USERS, is_equal_share
from .types import BreakSlot, RestSlot, Slot


def distribute_rest_plan_units(
    number_of_users: int,
    number_of_periods: int,
    minimum_break_units: int,
    total_units: int,
    optimise_breaks: bool = False,
) -> list[int]:
    """
    Split total_units into alternating rest and break unit counts.

    Feasibility is not re-checked here; callers validate first.

    Args:
        number_of_users: Users rotating through the rest periods
        number_of_periods: Number of rest periods
        minimum_break_units: Minimum break length in units
        total_units: Units available in the rounded rest window
        optimise_breaks: Spread leftover units over breaks (equal share only;
            unequal share always does this)

    Returns:
        List of length 2 * number_of_periods - 1, or an empty list for a
        user/period combination without a distribution rule
    """
    number_of_breaks = number_of_periods - 1
    sequence_length = number_of_periods + number_of_breaks

    # Units left for resting once the minimum breaks are reserved
    maximum_rest_units = total_units - number_of_breaks * minimum_break_units

    if is_equal_share(number_of_users, number_of_periods):
        rest_period = maximum_rest_units // number_of_periods

        if optimise_breaks and number_of_breaks:
            leftover_units = maximum_rest_units % number_of_periods
            break_period = minimum_break_units + leftover_units // number_of_breaks
        else:
            break_period = minimum_break_units

        return [
            rest_period if index % 2 == 0 else break_period
            for index in range(sequence_length)
        ]

    if number_of_users != UNEQUAL_SHARE_USERS or number_of_periods < number_of_users:
        return []

    long_periods = number_of_periods // number_of_users
    short_periods = long_periods + 1

    rest_units_per_user = maximum_rest_units // number_of_users
    leftover_units = maximum_rest_units % number_of_users

    short_rest_period = rest_units_per_user // short_periods
    long_rest_period = rest_units_per_user // long_periods

    leftover_units += rest_units_per_user % long_periods + rest_units_per_user % short_periods

    break_period = minimum_break_units + leftover_units // number_of_breaks

    # 3 periods: s-b-L-b-s; 5 periods: s-b-L-b-s-b-L-b-s
    units = []
    for index in range(sequence_length):
        if index % 2 == 1:
            units.append(break_period)
        elif index % 4 == 0:
            units.append(short_rest_period)
        else:
            units.append(long_rest_period)
    return units


def to_slots(units: Sequence[int]) -> list[Slot]:
    """Convert an alternating unit sequence into typed rest/break slots."""
    return [
        RestSlot(count) if index % 2 == 0 else BreakSlot(count)
        for index, count in enumerate(units)
    ]


def rest_units(slots: Sequence[Slot]) -> list[int]:
    """Unit counts of the rest slots, in order."""
    return [slot.units for slot in slots if isinstance(slot, RestSlot)]


def break_units(slots: Sequence[Slot]) -> list[int]:
    """Unit counts of the break slots, in order."""
    return [slot.units for slot in slots if isinstance(slot, BreakSlot)]
