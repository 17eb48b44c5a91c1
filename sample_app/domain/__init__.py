"""Domain models used across application layer boundaries."""

from .models import PLATFORM_COMPONENT_DESCRIPTIONS, PLATFORM_COMPONENTS, AppIdentity, InfoSnapshot
from .timeline import (
    STATUS_ENDPOINTS,
    domain_build_info_snapshot,
    domain_build_status_payload,
    domain_format_rfc3339,
    domain_format_uptime,
    domain_platform_label,
    domain_utc_now,
)

__all__ = [
    "AppIdentity",
    "InfoSnapshot",
    "PLATFORM_COMPONENTS",
    "PLATFORM_COMPONENT_DESCRIPTIONS",
    "STATUS_ENDPOINTS",
    "domain_build_info_snapshot",
    "domain_build_status_payload",
    "domain_format_rfc3339",
    "domain_format_uptime",
    "domain_platform_label",
    "domain_utc_now",
]
