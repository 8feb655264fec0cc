"""
Feasibility checks for rest requests.

Every request maps to exactly one InputStatus. Expected problems are
reported as data; nothing here raises for bad user input.
"""

import logging

from .types import InputStatus, RestRequest
from .units import calculate_total_units, round_rest_interval

logger = logging.getLogger(__name__)

# Only 2 users have a defined rule when periods don't divide evenly
UNEQUAL_SHARE_USERS = 2


def minimum_units_required(number_of_periods: int, minimum_break_units: int) -> int:
    """
    Smallest number of units that can hold the requested periods and breaks.

    Even period counts need one unit per period plus the minimum breaks.
    Odd period counts use the short/long bound: twice the product of long
    and short period counts, plus the minimum breaks.
    """
    break_units = minimum_break_units * (number_of_periods - 1)

    if number_of_periods % 2 == 0:
        return number_of_periods + break_units

    long_periods = number_of_periods // 2
    short_periods = long_periods + 1
    return long_periods * short_periods * 2 + break_units


def is_equal_share(number_of_users: int, number_of_periods: int) -> bool:
    """True if every user gets the same number of rest periods."""
    return number_of_periods % number_of_users == 0


def validate_inputs(request: RestRequest) -> InputStatus:
    """
    Check whether a request can produce a rest plan.

    Checks run in order: interval direction, available units, then
    user/period combination. Every user needs at least one rest period, so
    fewer periods than users is never supported.
    """
    if request.begin_datetime >= request.end_datetime:
        return "negative_interval"

    rounded = round_rest_interval(
        request.begin_datetime, request.end_datetime, request.unit_length
    )
    total_units = calculate_total_units(rounded, request.unit_length)

    required = minimum_units_required(request.number_of_periods, request.minimum_break_units)
    if total_units < required:
        logger.debug("Interval too small: %d units, %d required", total_units, required)
        return "too_small_interval"

    if request.number_of_periods < request.number_of_users:
        return "unsupported_combination"

    if not is_equal_share(request.number_of_users, request.number_of_periods):
        if request.number_of_users != UNEQUAL_SHARE_USERS:
            return "unsupported_combination"

    return "valid"
