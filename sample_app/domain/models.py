"""Typed domain models shared across runtime layers.

This module provides the process-wide application identity and the read-only
platform component mapping advertised by the status surfaces.
"""

from dataclasses import asdict, dataclass
from datetime import datetime
from types import MappingProxyType
from typing import Final, Mapping


@dataclass(frozen=True)
class AppIdentity:
    """Static application metadata for runtime identification.

    Attributes:
        name: Application name reported by every surface.
        version: Application version string.
        start_time: Timezone-aware UTC instant captured once at process launch.
    """

    name: str
    version: str
    start_time: datetime


@dataclass(frozen=True)
class InfoSnapshot:
    """Per-request runtime information derived from the application identity.

    Attributes:
        name: Application name.
        version: Application version string.
        python_version: Interpreter runtime identifier.
        platform: Operating system and machine architecture as `<os>/<arch>`.
        start_time: RFC3339 start timestamp.
        uptime: Compact human-readable uptime.
    """

    name: str
    version: str
    python_version: str
    platform: str
    start_time: str
    uptime: str

    def to_payload(self) -> dict[str, str]:
        """Return the JSON-ready field mapping in declaration order."""

        return asdict(self)


PLATFORM_COMPONENTS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "gitops": "argocd",
        "policies": "kyverno",
        "secrets": "sealed-secrets",
        "ingress": "traefik",
        "cluster": "k3d",
        "network": "tailscale",
    }
)

PLATFORM_COMPONENT_DESCRIPTIONS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "k3d": "Lightweight Kubernetes cluster",
        "Argo CD": "GitOps continuous delivery",
        "Kyverno": "Policy management and security",
        "Tailscale": "Secure networking and remote access",
        "Sealed Secrets": "Encrypted secret management",
        "Traefik": "Ingress controller and load balancer",
    }
)
