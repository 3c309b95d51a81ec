"""Typed interfaces for health-check collaborators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Awaitable, Protocol

from app.domain import DatabaseReadiness

DEFAULT_HEALTH_TIMEOUT_MS = 1_000


@dataclass(frozen=True)
class ProbeRequest:
    """One reachability probe request.

    Attributes:
        host: Target host.
        port: Target TCP port.
        timeout_ms: Per-probe timeout in milliseconds.
        label: Dependency label used in diagnostics.
    """

    host: str
    port: int
    timeout_ms: float = DEFAULT_HEALTH_TIMEOUT_MS
    label: str | None = None


class TcpProbePort(Protocol):
    """Port definition for transport-level reachability probes."""

    def __call__(self, request: ProbeRequest) -> Awaitable[None]:
        """Probe one target.

        Args:
            request: Target and timeout.

        Returns:
            Awaitable[None]: Completes when the connection is established.

        Raises:
            ProbeConnectionError: Raised when the connection fails.
            ProbeTimeoutError: Raised when the timeout elapses first.
        """


class DatabaseReadinessPort(Protocol):
    """Port definition for datastore connectivity and schema checks."""

    def db_check_readiness(self) -> DatabaseReadiness:
        """Check connectivity and migration status.

        Returns:
            DatabaseReadiness: Schema status with diagnostic detail.

        Raises:
            ConnectionError: Raised when the datastore cannot be reached.
        """
