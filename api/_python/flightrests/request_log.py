"""
History of recent rest requests.

Requests are kept in a JSON file. Every change runs maintenance:
1. Entries older than the retention window (6 months) are dropped
2. The oldest entries are evicted until at most max_entries (50) remain

Two requests equal in every field except creation_datetime are duplicates;
adding one replaces the other, so it moves to the top of the history.
"""

import calendar
import json
import logging
import os
from datetime import UTC, datetime
from pathlib import Path

from .defaults import (
    REQUEST_LOG_DEFAULT_PATH,
    REQUEST_LOG_ENV_VAR,
    REQUEST_LOG_MAX_ENTRIES,
    REQUEST_LOG_RETENTION_MONTHS,
)
from .serialization import request_from_dict, request_to_dict
from .types import RestRequest

logger = logging.getLogger(__name__)


def default_log_path() -> Path:
    """Log file location, overridable with FLIGHTRESTS_REQUEST_LOG."""
    return Path(os.environ.get(REQUEST_LOG_ENV_VAR, REQUEST_LOG_DEFAULT_PATH)).expanduser()


def months_before(dt: datetime, months: int) -> datetime:
    """Same wall time `months` calendar months earlier (day clamped to month end)."""
    month_index = dt.year * 12 + (dt.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    day = min(dt.day, calendar.monthrange(year, month)[1])
    return dt.replace(year=year, month=month, day=day)


def _as_aware(dt: datetime) -> datetime:
    # Naive creation times are stored as UTC
    return dt if dt.tzinfo is not None else dt.replace(tzinfo=UTC)


class RequestLog:
    """
    File-backed set of recent rest requests.

    Args:
        path: JSON file location (defaults to default_log_path())
        max_entries: Maximum number of stored requests
        retention_months: Age after which requests are dropped
    """

    def __init__(
        self,
        path: Path | str | None = None,
        max_entries: int = REQUEST_LOG_MAX_ENTRIES,
        retention_months: int = REQUEST_LOG_RETENTION_MONTHS,
    ):
        self.path = Path(path) if path is not None else default_log_path()
        self.max_entries = max_entries
        self.retention_months = retention_months
        self._requests: list[RestRequest] = self._load()

    @property
    def requests(self) -> list[RestRequest]:
        """Stored requests, newest first."""
        return sorted(
            self._requests, key=lambda r: _as_aware(r.creation_datetime), reverse=True
        )

    def __len__(self) -> int:
        return len(self._requests)

    def __contains__(self, request: RestRequest) -> bool:
        return request in self._requests

    def add_request(self, request: RestRequest, now: datetime | None = None) -> None:
        """Add a request (replacing any duplicate), run maintenance, save."""
        self._requests = [r for r in self._requests if r != request]
        self._requests.append(request)
        self.clean_up(now)
        self._save()

    def remove_request(self, request: RestRequest) -> None:
        """Remove a request if present, then save."""
        self._requests = [r for r in self._requests if r != request]
        self._save()

    def clear_log(self) -> None:
        """Remove every request, then save."""
        self._requests = []
        self._save()

    def clean_up(self, now: datetime | None = None) -> None:
        """
        Drop expired requests and trim to max_entries.

        Args:
            now: Reference instant for the retention window (defaults to now)
        """
        now = _as_aware(now) if now is not None else datetime.now(UTC)
        cutoff = months_before(now, self.retention_months)

        kept = [r for r in self._requests if _as_aware(r.creation_datetime) >= cutoff]
        expired = len(self._requests) - len(kept)

        # Oldest first, so eviction takes from the front
        kept.sort(key=lambda r: _as_aware(r.creation_datetime))
        overflow = max(0, len(kept) - self.max_entries)
        self._requests = kept[overflow:]

        if expired or overflow:
            logger.debug("Request log cleanup: %d expired, %d evicted", expired, overflow)

    def _load(self) -> list[RestRequest]:
        if not self.path.exists():
            return []

        try:
            with open(self.path) as f:
                data = json.load(f)
            return [request_from_dict(item) for item in data["requests"]]
        except (OSError, json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            logger.warning("Ignoring unreadable request log %s: %s", self.path, e)
            return []

    def _save(self) -> None:
        data = {"requests": [request_to_dict(r) for r in self._requests]}
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w") as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            logger.warning("Could not write request log %s: %s", self.path, e)
