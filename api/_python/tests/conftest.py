"""
Pytest fixtures for rest plan tests.
"""

import sys
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from flightrests.calculator import RestCalculator
from flightrests.request_log import RequestLog
from helpers import make_request


@pytest.fixture
def calculator():
    """RestCalculator instance."""
    return RestCalculator()


@pytest.fixture
def night_begin():
    """22:00 UTC, the start of an overnight rest window."""
    return datetime(2026, 3, 10, 22, 0, tzinfo=UTC)


@pytest.fixture
def overnight_request(night_begin):
    """8-hour window (96 units), 2 pilots, 2 rest periods, 5 min breaks."""
    return make_request(night_begin, timedelta(hours=8), time_zone="Europe/Lisbon")


@pytest.fixture
def request_log(tmp_path):
    """Empty request log backed by a temporary file."""
    return RequestLog(tmp_path / "request_log.json")
