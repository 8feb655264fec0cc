"""Tests for the JSON tool layer."""

import pytest
import time_machine

from rest_plan_tools import (
    build_rest_request,
    calculate_rest_plan,
    get_recent_requests,
    invoke_tool,
    validate_arguments,
    validate_rest_request,
    validate_time,
)


@pytest.fixture
def flight_crew_params() -> dict:
    """Two pilots, 01:00-06:00 picked at 23:00 UTC the evening before."""
    return {
        "begin_time": "01:00",
        "end_time": "06:00",
        "time_zone": "UTC",
        "crew_role": "flight_crew",
        "number_of_users": 2,
        "number_of_periods": 2,
        "minimum_break_units": 1,
        "now": "2026-01-10T23:00",
    }


@pytest.fixture
def cabin_crew_params() -> dict:
    """Three cabin groups, landing 07:00 with 90 min service, Lisbon winter time."""
    return {
        "begin_time": "01:00",
        "landing_time": "07:00",
        "service_minutes": 90,
        "time_zone": "Europe/Lisbon",
        "crew_role": "cabin_crew",
        "number_of_users": 3,
        "number_of_periods": 3,
        "minimum_break_units": 1,
        "now": "2026-01-10T23:00",
    }


class TestValidateArguments:
    """Field presence and format checks."""

    def test_valid_flight_crew(self, flight_crew_params) -> None:
        assert validate_arguments(flight_crew_params) is None

    def test_valid_cabin_crew(self, cabin_crew_params) -> None:
        assert validate_arguments(cabin_crew_params) is None

    def test_missing_begin_time(self, flight_crew_params) -> None:
        del flight_crew_params["begin_time"]
        assert validate_arguments(flight_crew_params) == "Missing required field: begin_time"

    def test_unknown_time_zone(self, flight_crew_params) -> None:
        flight_crew_params["time_zone"] = "Mars/Olympus_Mons"
        assert "Unknown time zone" in validate_arguments(flight_crew_params)

    def test_bad_time_format(self, flight_crew_params) -> None:
        flight_crew_params["end_time"] = "25:00"
        assert "Invalid end time format" in validate_arguments(flight_crew_params)

    def test_flight_crew_needs_end_time(self, flight_crew_params) -> None:
        del flight_crew_params["end_time"]
        assert validate_arguments(flight_crew_params) == "Missing required field: end_time"

    def test_cabin_crew_needs_landing_time(self, cabin_crew_params) -> None:
        del cabin_crew_params["landing_time"]
        assert validate_arguments(cabin_crew_params) == "Missing required field: landing_time"

    def test_unsupported_service_duration(self, cabin_crew_params) -> None:
        cabin_crew_params["service_minutes"] = 50
        assert "Unsupported service duration" in validate_arguments(cabin_crew_params)

    def test_unknown_crew_role(self, flight_crew_params) -> None:
        flight_crew_params["crew_role"] = "ground_crew"
        assert "Unknown crew role" in validate_arguments(flight_crew_params)

    @pytest.mark.parametrize(
        "field,value",
        [
            ("number_of_users", 4),
            ("number_of_users", True),
            ("number_of_periods", 6),
            ("number_of_periods", "3"),
            ("minimum_break_units", 4),
        ],
    )
    def test_out_of_range_numbers(self, flight_crew_params, field, value) -> None:
        flight_crew_params[field] = value
        assert field in validate_arguments(flight_crew_params)

    def test_unknown_display_time_zone(self, flight_crew_params) -> None:
        flight_crew_params["display_time_zone"] = "Nowhere/Special"
        assert "Unknown display time zone" in validate_arguments(flight_crew_params)

    def test_bad_now(self, flight_crew_params) -> None:
        flight_crew_params["now"] = "yesterday"
        assert "Invalid now datetime" in validate_arguments(flight_crew_params)

    def test_validate_time(self) -> None:
        assert validate_time("07:00")
        assert validate_time("23:59")
        assert not validate_time("7:00")
        assert not validate_time("24:00")
        assert not validate_time("ab:cd")


class TestCalculateRestPlan:
    """Full tool results."""

    def test_flight_crew_plan(self, flight_crew_params) -> None:
        """60 units -> [29, 1, 29]."""
        result = calculate_rest_plan(flight_crew_params)

        assert result["status"] == "valid"
        assert result["total_units"] == 60
        assert result["begin_datetime"] == "2026-01-11T01:00:00+00:00"
        assert result["end_datetime"] == "2026-01-11T06:00:00+00:00"

        periods = result["plan"]["rest_periods"]
        assert [(p["owner_label"], p["local_start"], p["local_end"]) for p in periods] == [
            ("Pilot 1", "01:00", "03:25"),
            ("Pilot 2", "03:30", "05:55"),
        ]
        assert periods[0]["duration"] == "2:25"
        assert periods[0]["duration_minutes"] == 145

    def test_cabin_crew_plan(self, cabin_crew_params) -> None:
        """01:00-05:30 (54 units) -> [17, 1, 17, 1, 17]."""
        result = calculate_rest_plan(cabin_crew_params)

        assert result["status"] == "valid"
        assert result["local_end"] == "05:30"
        assert result["utc_offset"] == "UTC+00:00"
        assert result["total_units"] == 54

        periods = result["plan"]["rest_periods"]
        assert [(p["owner_label"], p["local_start"], p["local_end"]) for p in periods] == [
            ("Group 1", "01:00", "02:25"),
            ("Group 2", "02:30", "03:55"),
            ("Group 3", "04:00", "05:25"),
        ]

    def test_too_small_window(self, flight_crew_params) -> None:
        flight_crew_params["end_time"] = "01:10"
        result = calculate_rest_plan(flight_crew_params)

        assert result["status"] == "too_small_interval"
        assert result["minimum_units_required"] == 3
        assert result["plan"]["rest_periods"] == []

    def test_service_longer_than_window(self, cabin_crew_params) -> None:
        """Landing 02:00 minus 3h service ends before the rests begin."""
        cabin_crew_params["landing_time"] = "02:00"
        cabin_crew_params["service_minutes"] = 180
        result = calculate_rest_plan(cabin_crew_params)

        assert result["status"] == "negative_interval"
        assert result["plan"]["rest_periods"] == []

    def test_display_time_zone(self, flight_crew_params) -> None:
        flight_crew_params["display_time_zone"] = "Asia/Tokyo"
        result = calculate_rest_plan(flight_crew_params)

        assert result["plan"]["time_zone"] == "Asia/Tokyo"
        assert result["plan"]["rest_periods"][0]["local_start"] == "10:00"

    def test_invalid_arguments_raise(self, flight_crew_params) -> None:
        flight_crew_params["number_of_periods"] = 9
        with pytest.raises(ValueError, match="number_of_periods"):
            calculate_rest_plan(flight_crew_params)

    @time_machine.travel("2026-01-10T23:00:00Z", tick=False)
    def test_defaults_to_current_time(self, flight_crew_params) -> None:
        """Without now the clock is used."""
        expected = calculate_rest_plan(flight_crew_params)
        del flight_crew_params["now"]
        assert calculate_rest_plan(flight_crew_params) == expected

    def test_save_to_history(self, flight_crew_params, request_log) -> None:
        flight_crew_params["save_to_history"] = True
        calculate_rest_plan(flight_crew_params, request_log=request_log)

        assert len(request_log) == 1
        assert request_log.requests[0].number_of_periods == 2

    def test_invalid_request_not_saved(self, flight_crew_params, request_log) -> None:
        flight_crew_params["save_to_history"] = True
        flight_crew_params["end_time"] = "01:05"
        calculate_rest_plan(flight_crew_params, request_log=request_log)

        assert len(request_log) == 0


class TestOtherTools:
    """Validation, history and routing."""

    def test_validate_rest_request(self, flight_crew_params) -> None:
        result = validate_rest_request(flight_crew_params)
        assert result["status"] == "valid"
        assert "plan" not in result

    def test_build_rest_request_uses_defaults(self) -> None:
        request = build_rest_request(
            {"begin_time": "01:00", "end_time": "06:00", "time_zone": "UTC",
             "now": "2026-01-10T23:00"}
        )
        assert request.number_of_users == 2
        assert request.number_of_periods == 2
        assert request.minimum_break_units == 1
        assert request.crew_role == "flight_crew"
        assert request.optimise_breaks is False

    def test_recent_requests(self, flight_crew_params, request_log) -> None:
        flight_crew_params["save_to_history"] = True
        calculate_rest_plan(flight_crew_params, request_log=request_log)

        result = get_recent_requests(
            {"time_zone": "UTC", "now": "2026-01-10T23:30"}, request_log=request_log
        )

        assert len(result["requests"]) == 1
        assert result["requests"][0]["date_label"] == "Today"
        assert result["requests"][0]["local_begin"] == "01:00"
        assert result["requests"][0]["created"] == "10/01/2026 23:00 UTC"

    def test_invoke_tool_routes(self, flight_crew_params) -> None:
        assert invoke_tool("validate_rest_request", flight_crew_params)["status"] == "valid"

    def test_invoke_unknown_tool(self) -> None:
        with pytest.raises(ValueError, match="Unknown tool"):
            invoke_tool("calculate_phase_shift", {})

    def test_recent_requests_unknown_time_zone(self, request_log) -> None:
        """Bad zones are argument errors, not lookup failures."""
        with pytest.raises(ValueError, match="Unknown time zone"):
            get_recent_requests({"time_zone": "Mars/Olympus"}, request_log=request_log)

    def test_recent_requests_bad_now(self, request_log) -> None:
        with pytest.raises(ValueError, match="Invalid now datetime"):
            get_recent_requests(
                {"time_zone": "UTC", "now": "yesterday"}, request_log=request_log
            )

    def test_invoke_recent_requests_unknown_time_zone(self) -> None:
        with pytest.raises(ValueError, match="Unknown time zone"):
            invoke_tool("get_recent_requests", {"time_zone": "Mars/Olympus"})
