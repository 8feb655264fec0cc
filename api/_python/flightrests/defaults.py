"""
Default selections and selectable options for rest requests.

Service durations are offered in 15-minute steps from 1h00 to 3h00 (plus
"no time"); minimum breaks from none to 15 minutes.
"""

from .types import CrewRole

DEFAULT_USERS = 2
DEFAULT_REST_PERIODS = 2
DEFAULT_MINIMUM_BREAK_UNITS = 1  # 5 min
DEFAULT_OPTIMISE_BREAKS = False
DEFAULT_CREW_ROLE: CrewRole = "flight_crew"
DEFAULT_SERVICE_MINUTES = 90

USERS_RANGE = range(2, 4)  # 2-3 pilots or cabin groups
REST_PERIODS_RANGE = range(2, 6)  # 2-5 rest periods

MINIMUM_BREAK_OPTIONS: dict[int, str] = {
    0: "None",
    1: "5 min",
    2: "10 min",
    3: "15 min",
}

# Minutes -> label
SERVICE_DURATION_OPTIONS: dict[int, str] = {
    0: "No Time",
    60: "1h00",
    75: "1h15",
    90: "1h30",
    105: "1h45",
    120: "2h00",
    135: "2h15",
    150: "2h30",
    165: "2h45",
    180: "3h00",
}

# Request history maintenance
REQUEST_LOG_MAX_ENTRIES = 50
REQUEST_LOG_RETENTION_MONTHS = 6
REQUEST_LOG_ENV_VAR = "FLIGHTRESTS_REQUEST_LOG"
REQUEST_LOG_DEFAULT_PATH = "~/.flightrests/request_log.json"
