"""
Dict conversion for requests and plans.

Datetimes are ISO 8601 strings. Used by the request log file and the JSON
tool/HTTP layers.
"""

from datetime import datetime
from typing import Any

from .formatting import format_duration_hhmm, format_time_in_tz, owner_label
from .types import AssignedRestPeriod, RestPlan, RestRequest


def request_to_dict(request: RestRequest) -> dict[str, Any]:
    """Serialize a RestRequest."""
    return {
        "begin_datetime": request.begin_datetime.isoformat(),
        "end_datetime": request.end_datetime.isoformat(),
        "number_of_users": request.number_of_users,
        "number_of_periods": request.number_of_periods,
        "minimum_break_units": request.minimum_break_units,
        "crew_role": request.crew_role,
        "time_zone": request.time_zone,
        "optimise_breaks": request.optimise_breaks,
        "unit_length": request.unit_length,
        "creation_datetime": request.creation_datetime.isoformat(),
    }


def request_from_dict(data: dict[str, Any]) -> RestRequest:
    """
    Deserialize a RestRequest.

    Raises:
        KeyError: If a required field is missing
        ValueError: If a datetime is not valid ISO 8601
    """
    kwargs: dict[str, Any] = {
        "begin_datetime": datetime.fromisoformat(data["begin_datetime"]),
        "end_datetime": datetime.fromisoformat(data["end_datetime"]),
        "number_of_users": int(data["number_of_users"]),
        "number_of_periods": int(data["number_of_periods"]),
        "minimum_break_units": int(data["minimum_break_units"]),
        "crew_role": data.get("crew_role", "flight_crew"),
        "time_zone": data.get("time_zone", "UTC"),
        "optimise_breaks": bool(data.get("optimise_breaks", False)),
    }
    if "unit_length" in data:
        kwargs["unit_length"] = int(data["unit_length"])
    if data.get("creation_datetime"):
        kwargs["creation_datetime"] = datetime.fromisoformat(data["creation_datetime"])
    return RestRequest(**kwargs)


def rest_period_to_dict(period: AssignedRestPeriod, tz_name: str) -> dict[str, Any]:
    """Serialize an assigned rest period with display fields for tz_name."""
    interval = period.period
    return {
        "owner": period.owner,
        "owner_label": owner_label(period.owner, period.crew_role),
        "crew_role": period.crew_role,
        "start": interval.start.isoformat(),
        "end": interval.end.isoformat(),
        "local_start": format_time_in_tz(interval.start, tz_name),
        "local_end": format_time_in_tz(interval.end, tz_name),
        "duration": format_duration_hhmm(interval.duration.total_seconds()),
        "duration_minutes": int(interval.duration.total_seconds() // 60),
    }


def plan_to_dict(plan: RestPlan) -> dict[str, Any]:
    """Serialize a RestPlan in its display time zone."""
    return {
        "time_zone": plan.time_zone,
        "rest_periods": [rest_period_to_dict(p, plan.time_zone) for p in plan.rest_periods],
    }
