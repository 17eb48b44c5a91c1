"""Tests for application info and API status endpoints."""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from pathlib import Path

from fastapi.testclient import TestClient

from sample_app.api.application import create_api_application
from sample_app.domain import AppIdentity

_START_TIME = datetime(2026, 10, 19, 12, 0, 0, tzinfo=timezone.utc)
_UPTIME_PATTERN = re.compile(r"^(?:(\d+)h)?(?:(\d+)m)?(\d+)s$")


class _SteppingClock:
    """Deterministic clock advancing by fixed steps on every read."""

    def __init__(self, start: datetime, step: timedelta):
        self._current = start
        self._step = step

    def __call__(self) -> datetime:
        current = self._current
        self._current = current + self._step
        return current


def _parse_uptime_seconds(value: str) -> int:
    """Parse a compact uptime string into whole seconds.

    Args:
        value: Uptime such as `1h2m3s`.

    Returns:
        int: Total seconds.

    Raises:
        AssertionError: Raised when the value is not a compact duration.
    """

    match = _UPTIME_PATTERN.match(value)
    assert match is not None, value
    hours, minutes, seconds = (int(group or 0) for group in match.groups())
    return hours * 3600 + minutes * 60 + seconds


def _build_client(tmp_path: Path, clock) -> TestClient:
    identity = AppIdentity(name="sample-app", version="1.0.0", start_time=_START_TIME)
    return TestClient(create_api_application(identity=identity, static_directory=tmp_path, clock=clock))


def test_api_info_returns_identity_runtime_and_uptime(tmp_path: Path) -> None:
    """Return HTTP 200 info payload with runtime and uptime fields.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when response does not match expected payload.
    """

    client = _build_client(tmp_path, clock=lambda: _START_TIME + timedelta(hours=3, minutes=2, seconds=1))

    response = client.get("/info")

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"
    payload = response.json()
    assert payload["name"] == "sample-app"
    assert payload["version"] == "1.0.0"
    assert payload["start_time"] == "2026-10-19T12:00:00Z"
    assert payload["uptime"] == "3h2m1s"
    assert payload["python_version"]
    assert "/" in payload["platform"]


def test_api_info_uptime_is_non_negative_and_non_decreasing(tmp_path: Path) -> None:
    """Report uptime that never goes backwards across successive calls.

    Returns:
        None: Assertions validate uptime monotonicity.

    Raises:
        AssertionError: Raised when uptime decreases.
    """

    client = _build_client(tmp_path, clock=_SteppingClock(start=_START_TIME, step=timedelta(milliseconds=700)))

    observed = [_parse_uptime_seconds(client.get("/info").json()["uptime"]) for _ in range(6)]

    assert observed[0] == 0
    assert all(value >= 0 for value in observed)
    assert observed == sorted(observed)
    assert observed[-1] == 4


def test_api_status_returns_endpoints_in_fixed_order(tmp_path: Path) -> None:
    """Return HTTP 200 status payload with endpoints and platform components.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when response does not match expected payload.
    """

    client = _build_client(tmp_path, clock=lambda: _START_TIME + timedelta(minutes=5))

    response = client.get("/api/status")

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"
    payload = response.json()
    assert payload["status"] == "ok"
    assert payload["timestamp"] == "2026-10-19T12:05:00Z"
    assert payload["application"] == "sample-app"
    assert payload["version"] == "1.0.0"
    assert payload["endpoints"] == ["/health", "/ready", "/info", "/api/status"]
    assert list(payload["platform"]) == ["gitops", "policies", "secrets", "ingress", "cluster", "network"]
    assert payload["platform"]["cluster"] == "k3d"
