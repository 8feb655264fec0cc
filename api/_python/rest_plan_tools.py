"""
Tool implementations for rest plan calculation.

Provides three tools:
1. validate_rest_request - Resolve picker times and report feasibility
2. calculate_rest_plan - Full rest plan with display fields
3. get_recent_requests - Request history, newest first

Arguments and results are plain JSON-compatible dicts.
"""

from collections.abc import Iterable
from datetime import datetime
from typing import Any
from zoneinfo import ZoneInfo

from flightrests.calculator import RestCalculator
from flightrests.date_adjuster import resolve_rest_window
from flightrests.defaults import (
    DEFAULT_CREW_ROLE,
    DEFAULT_MINIMUM_BREAK_UNITS,
    DEFAULT_OPTIMISE_BREAKS,
    DEFAULT_REST_PERIODS,
    DEFAULT_SERVICE_MINUTES,
    DEFAULT_USERS,
    MINIMUM_BREAK_OPTIONS,
    REST_PERIODS_RANGE,
    SERVICE_DURATION_OPTIONS,
    USERS_RANGE,
)
from flightrests.feasibility import minimum_units_required
from flightrests.formatting import (
    format_short_datetime_utc,
    format_time_in_tz,
    is_known_timezone,
    relative_date_label,
    utc_offset_label,
)
from flightrests.request_log import RequestLog
from flightrests.serialization import plan_to_dict, request_to_dict
from flightrests.types import InputStatus, RestRequest

STATUS_MESSAGES: dict[InputStatus, str] = {
    "valid": "Rest plan calculated.",
    "negative_interval": "The end of the rest window must be after its beginning.",
    "too_small_interval": "The rest window is too short for the selected periods and breaks.",
    "unsupported_combination": (
        "Uneven rest periods are only supported for 2 crew members or groups."
    ),
}


def validate_time(t: str) -> bool:
    """Validate time format like '07:00'."""
    if not isinstance(t, str) or len(t) != 5:
        return False
    try:
        parts = t.split(":")
        if len(parts) != 2:
            return False
        hour = int(parts[0])
        minute = int(parts[1])
        return 0 <= hour <= 23 and 0 <= minute <= 59
    except ValueError:
        return False


def _is_int_in(value: Any, allowed: Iterable[int]) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value in allowed


def validate_arguments(data: dict[str, Any]) -> str | None:
    """Validate request data, return error message or None if valid."""
    for field in ("begin_time", "time_zone"):
        if field not in data:
            return f"Missing required field: {field}"

    if not isinstance(data["time_zone"], str) or not is_known_timezone(data["time_zone"]):
        return f"Unknown time zone: {data['time_zone']}"

    display_tz = data.get("display_time_zone")
    if display_tz is not None and (
        not isinstance(display_tz, str) or not is_known_timezone(display_tz)
    ):
        return f"Unknown display time zone: {display_tz}"

    if not validate_time(data["begin_time"]):
        return f"Invalid begin time format: {data['begin_time']}"

    crew_role = data.get("crew_role", DEFAULT_CREW_ROLE)
    if crew_role == "flight_crew":
        if "end_time" not in data:
            return "Missing required field: end_time"
        if not validate_time(data["end_time"]):
            return f"Invalid end time format: {data['end_time']}"
    elif crew_role == "cabin_crew":
        if "landing_time" not in data:
            return "Missing required field: landing_time"
        if not validate_time(data["landing_time"]):
            return f"Invalid landing time format: {data['landing_time']}"
        service = data.get("service_minutes", DEFAULT_SERVICE_MINUTES)
        if not _is_int_in(service, SERVICE_DURATION_OPTIONS):
            return f"Unsupported service duration: {service}"
    else:
        return f"Unknown crew role: {crew_role}"

    if not _is_int_in(data.get("number_of_users", DEFAULT_USERS), USERS_RANGE):
        return "number_of_users must be 2 or 3"
    if not _is_int_in(data.get("number_of_periods", DEFAULT_REST_PERIODS), REST_PERIODS_RANGE):
        return "number_of_periods must be a number between 2 and 5"
    if not _is_int_in(
        data.get("minimum_break_units", DEFAULT_MINIMUM_BREAK_UNITS), MINIMUM_BREAK_OPTIONS
    ):
        return "minimum_break_units must be a number between 0 and 3"

    if "now" in data:
        try:
            datetime.fromisoformat(data["now"])
        except (TypeError, ValueError):
            return f"Invalid now datetime: {data['now']}"

    return None


def get_current_datetime_in_tz(tz_name: str) -> datetime:
    """Current time as an aware datetime in tz_name."""
    return datetime.now(ZoneInfo(tz_name))


def parse_reference_now(value: str | None, tz_name: str) -> datetime:
    """
    Parse an optional ISO "now" override.

    Naive values are interpreted in tz_name; None means the current time.
    """
    if not value:
        return get_current_datetime_in_tz(tz_name)
    now = datetime.fromisoformat(value)
    if now.tzinfo is None:
        now = now.replace(tzinfo=ZoneInfo(tz_name))
    return now.astimezone(ZoneInfo(tz_name))


def build_rest_request(params: dict[str, Any]) -> RestRequest:
    """
    Build a RestRequest from tool arguments.

    Expected keys: begin_time, end_time (flight crew) or landing_time and
    service_minutes (cabin crew), time_zone, plus optional number_of_users,
    number_of_periods, minimum_break_units, optimise_breaks, crew_role, now.

    Raises:
        ValueError: If validate_arguments() rejects the arguments
    """
    error = validate_arguments(params)
    if error:
        raise ValueError(error)

    tz_name = params["time_zone"]
    crew_role = params.get("crew_role", DEFAULT_CREW_ROLE)
    now = parse_reference_now(params.get("now"), tz_name)

    begin, end = resolve_rest_window(
        begin_time=params["begin_time"],
        crew_role=crew_role,
        now=now,
        end_time=params.get("end_time"),
        landing_time=params.get("landing_time"),
        service_seconds=int(params.get("service_minutes", DEFAULT_SERVICE_MINUTES)) * 60,
    )

    return RestRequest(
        begin_datetime=begin,
        end_datetime=end,
        number_of_users=int(params.get("number_of_users", DEFAULT_USERS)),
        number_of_periods=int(params.get("number_of_periods", DEFAULT_REST_PERIODS)),
        minimum_break_units=int(params.get("minimum_break_units", DEFAULT_MINIMUM_BREAK_UNITS)),
        crew_role=crew_role,
        time_zone=tz_name,
        optimise_breaks=bool(params.get("optimise_breaks", DEFAULT_OPTIMISE_BREAKS)),
        creation_datetime=now,
    )


def _window_summary(calculator: RestCalculator, request: RestRequest) -> dict[str, Any]:
    status = calculator.validate(request)
    _, total_units = calculator.rest_window(request)
    return {
        "status": status,
        "message": STATUS_MESSAGES[status],
        "begin_datetime": request.begin_datetime.isoformat(),
        "end_datetime": request.end_datetime.isoformat(),
        "local_begin": format_time_in_tz(request.begin_datetime, request.time_zone),
        "local_end": format_time_in_tz(request.end_datetime, request.time_zone),
        "utc_offset": utc_offset_label(request.time_zone, request.begin_datetime),
        "total_units": total_units,
        "minimum_units_required": minimum_units_required(
            request.number_of_periods, request.minimum_break_units
        ),
    }


def validate_rest_request(params: dict[str, Any]) -> dict[str, Any]:
    """Resolve the rest window and report its feasibility."""
    request = build_rest_request(params)
    return _window_summary(RestCalculator(), request)


def calculate_rest_plan(
    params: dict[str, Any], request_log: RequestLog | None = None
) -> dict[str, Any]:
    """
    Calculate a rest plan.

    When save_to_history is set and the request is valid, it is added to the
    request log (the default file unless request_log is given).
    """
    calculator = RestCalculator()
    request = build_rest_request(params)

    result = _window_summary(calculator, request)
    plan = calculator.build_rest_plan(request)

    display_tz = params.get("display_time_zone")
    if display_tz:
        plan.time_zone = display_tz

    result["plan"] = plan_to_dict(plan)

    if params.get("save_to_history") and result["status"] == "valid":
        log = request_log if request_log is not None else RequestLog()
        log.add_request(request, now=request.creation_datetime)

    return result


def get_recent_requests(
    params: dict[str, Any], request_log: RequestLog | None = None
) -> dict[str, Any]:
    """
    List stored requests, newest first, with a relative date label.

    Raises:
        ValueError: If time_zone is unknown or now is not an ISO datetime
    """
    tz_name = params.get("time_zone", "UTC")
    if not isinstance(tz_name, str) or not is_known_timezone(tz_name):
        raise ValueError(f"Unknown time zone: {tz_name}")
    if "now" in params:
        try:
            datetime.fromisoformat(params["now"])
        except (TypeError, ValueError):
            raise ValueError(f"Invalid now datetime: {params['now']}") from None

    log = request_log if request_log is not None else RequestLog()
    now = parse_reference_now(params.get("now"), tz_name)

    requests = []
    for request in log.requests:
        item = request_to_dict(request)
        item["date_label"] = relative_date_label(request.creation_datetime, tz_name, now)
        item["created"] = format_short_datetime_utc(request.creation_datetime)
        item["local_begin"] = format_time_in_tz(request.begin_datetime, request.time_zone)
        item["local_end"] = format_time_in_tz(request.end_datetime, request.time_zone)
        requests.append(item)

    return {"requests": requests}


def invoke_tool(tool_name: str, arguments: dict[str, Any]) -> dict[str, Any]:
    """Router function for CLI/HTTP invocation."""
    if tool_name == "validate_rest_request":
        return validate_rest_request(arguments)
    elif tool_name == "calculate_rest_plan":
        return calculate_rest_plan(arguments)
    elif tool_name == "get_recent_requests":
        return get_recent_requests(arguments)
    else:
        raise ValueError(f"Unknown tool: {tool_name}")
