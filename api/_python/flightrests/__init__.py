"""
FlightRests rest-period allocation engine.

Splits an in-flight rest window into fair rest periods for 2-3 pilots or
cabin crew groups.

Main entry points: validate() and compute_plan()
"""

from .calculator import RestCalculator, build_rest_plan, compute_plan, validate
from .date_adjuster import (
    adjusted_begin_datetime,
    adjusted_end_datetime,
    resolve_rest_window,
)
from .request_log import RequestLog
from .types import (
    UNIT_LENGTH_SECONDS,
    AssignedRestPeriod,
    BreakSlot,
    CrewRole,
    InputStatus,
    RestInterval,
    RestPlan,
    RestRequest,
    RestSlot,
)

__all__ = [
    # Types
    "RestRequest",
    "RestInterval",
    "AssignedRestPeriod",
    "RestPlan",
    "RestSlot",
    "BreakSlot",
    "CrewRole",
    "InputStatus",
    "UNIT_LENGTH_SECONDS",
    # Calculator
    "RestCalculator",
    "validate",
    "compute_plan",
    "build_rest_plan",
    # Date adjustment
    "adjusted_begin_datetime",
    "adjusted_end_datetime",
    "resolve_rest_window",
    # History
    "RequestLog",
]
