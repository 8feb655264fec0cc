"""
Rest plan calculation.

Entry point for the rest-period allocation engine:
1. Round the request window to unit boundaries (units)
2. Check feasibility (feasibility)
3. Distribute units over rest periods and breaks (distributor)
4. Lay out intervals, drop breaks, assign owners (assembler)

Invalid requests produce an empty plan; call validate() to find out why.
"""

import logging

from .assembler import assign_owners_remove_breaks, create_rest_plan_intervals
from .distributor import break_units, distribute_rest_plan_units, rest_units, to_slots
from .feasibility import validate_inputs
from .types import AssignedRestPeriod, InputStatus, RestInterval, RestPlan, RestRequest
from .units import calculate_total_units, round_rest_interval

logger = logging.getLogger(__name__)


class RestCalculator:
    """
    Computes fair rest plans for a crew.

    Stateless; one instance can serve any number of requests.
    """

    def validate(self, request: RestRequest) -> InputStatus:
        """Feasibility status of a request."""
        return validate_inputs(request)

    def rest_window(self, request: RestRequest) -> tuple[RestInterval, int]:
        """Rounded rest window and the number of units it holds."""
        rounded = round_rest_interval(
            request.begin_datetime, request.end_datetime, request.unit_length
        )
        return rounded, calculate_total_units(rounded, request.unit_length)

    def calculate_rests(self, request: RestRequest) -> list[AssignedRestPeriod]:
        """
        Calculate the assigned rest periods for a request.

        Args:
            request: Resolved rest request

        Returns:
            Rest periods in chronological order, or an empty list if the
            request is not valid
        """
        status = self.validate(request)
        if status != "valid":
            logger.debug("No rest plan: request status is %s", status)
            return []

        rounded, total_units = self.rest_window(request)

        units = distribute_rest_plan_units(
            number_of_users=request.number_of_users,
            number_of_periods=request.number_of_periods,
            minimum_break_units=request.minimum_break_units,
            total_units=total_units,
            optimise_breaks=request.optimise_breaks,
        )

        # Unreachable for validated requests
        if not units:
            logger.error(
                "Distributor returned no units for %d users, %d periods",
                request.number_of_users,
                request.number_of_periods,
            )
            return []

        slots = to_slots(units)
        logger.debug("Rest units %s, break units %s", rest_units(slots), break_units(slots))

        intervals = create_rest_plan_intervals(slots, rounded.start, request.unit_length)
        return assign_owners_remove_breaks(intervals, request.number_of_users, request.crew_role)

    def build_rest_plan(self, request: RestRequest) -> RestPlan:
        """Rest periods wrapped with the request's display time zone."""
        return RestPlan(time_zone=request.time_zone, rest_periods=self.calculate_rests(request))


def validate(request: RestRequest) -> InputStatus:
    """Convenience function: feasibility status of a request."""
    return RestCalculator().validate(request)


def compute_plan(request: RestRequest) -> list[AssignedRestPeriod]:
    """Convenience function: assigned rest periods for a request."""
    return RestCalculator().calculate_rests(request)


def build_rest_plan(request: RestRequest) -> RestPlan:
    """Convenience function: rest plan with display time zone."""
    return RestCalculator().build_rest_plan(request)
