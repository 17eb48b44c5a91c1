"""Clock, uptime and payload helpers derived from the application identity."""

from __future__ import annotations

import platform
from datetime import datetime, timedelta, timezone

from .models import PLATFORM_COMPONENTS, AppIdentity, InfoSnapshot

STATUS_ENDPOINTS: tuple[str, ...] = ("/health", "/ready", "/info", "/api/status")

_MICROSECONDS_PER_SECOND = 1_000_000


def domain_utc_now() -> datetime:
    """Return the current timezone-aware UTC instant."""

    return datetime.now(timezone.utc)


def domain_format_rfc3339(moment: datetime) -> str:
    """Render a datetime as an RFC3339 UTC timestamp with seconds precision.

    Args:
        moment: Datetime to render. Naive values are treated as UTC.

    Returns:
        str: Timestamp such as `2026-10-19T12:00:00Z`.

    Raises:
        ValueError: Raised when the datetime cannot be converted to UTC.
    """

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def domain_format_uptime(elapsed: timedelta) -> str:
    """Render an elapsed duration as a compact `3h2m1s` style string.

    The duration is rounded half away from zero to whole seconds. Negative
    durations are clamped to zero. Hours are never folded into days.

    Args:
        elapsed: Elapsed wall-clock duration.

    Returns:
        str: Compact duration such as `0s`, `45s`, `1m0s` or `26h0m0s`.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    total_microseconds = max(elapsed // timedelta(microseconds=1), 0)
    total_seconds = (total_microseconds + _MICROSECONDS_PER_SECOND // 2) // _MICROSECONDS_PER_SECOND
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)

    if hours:
        return f"{hours}h{minutes}m{seconds}s"
    if minutes:
        return f"{minutes}m{seconds}s"
    return f"{seconds}s"


def domain_platform_label() -> str:
    """Return the `<os>/<arch>` label of the running interpreter."""

    system_name = platform.system().lower() or "unknown"
    machine_name = platform.machine().lower() or "unknown"
    return f"{system_name}/{machine_name}"


def domain_build_info_snapshot(identity: AppIdentity, now: datetime) -> InfoSnapshot:
    """Build the runtime info snapshot for one request.

    Args:
        identity: Process-wide application identity.
        now: Current instant used for uptime computation.

    Returns:
        InfoSnapshot: Snapshot with runtime, platform and uptime details.

    Raises:
        ValueError: Raised when `now` and the start time cannot be compared.
    """

    return InfoSnapshot(
        name=identity.name,
        version=identity.version,
        python_version=platform.python_version(),
        platform=domain_platform_label(),
        start_time=domain_format_rfc3339(identity.start_time),
        uptime=domain_format_uptime(now - identity.start_time),
    )


def domain_build_status_payload(identity: AppIdentity, now: datetime) -> dict[str, object]:
    """Build the API status payload.

    Args:
        identity: Process-wide application identity.
        now: Current instant reported as the status timestamp.

    Returns:
        dict[str, object]: Status payload with endpoint list and platform components.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return {
        "status": "ok",
        "timestamp": domain_format_rfc3339(now),
        "application": identity.name,
        "version": identity.version,
        "endpoints": list(STATUS_ENDPOINTS),
        "platform": dict(PLATFORM_COMPONENTS),
    }
