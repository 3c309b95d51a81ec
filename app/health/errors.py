"""Project-native exceptions for dependency health checks."""

from __future__ import annotations


class HealthProbeError(Exception):
    """Base exception for a failed reachability probe.

    Attributes:
        label: Dependency label the probe was issued for.
    """

    def __init__(self, message: str, label: str | None = None):
        super().__init__(message)
        self.label = label


class ProbeConnectionError(HealthProbeError, ConnectionError):
    """Connection attempt was refused or failed at transport level."""


class ProbeTimeoutError(HealthProbeError, TimeoutError):
    """Connection attempt did not settle within the probe timeout."""


class DependenciesUnavailableError(RuntimeError):
    """Raised when one or more dependency checks failed.

    Attributes:
        failed_dependencies: Failed dependency names in registry order.
    """

    def __init__(self, failed_dependencies: tuple[str, ...]):
        self.failed_dependencies = failed_dependencies
        super().__init__(f"Unhealthy dependencies: {', '.join(failed_dependencies)}")
