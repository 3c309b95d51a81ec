"""Dependency health layer: target registry, reachability probe and aggregation."""

from .errors import DependenciesUnavailableError, HealthProbeError, ProbeConnectionError, ProbeTimeoutError
from .interfaces import DEFAULT_HEALTH_TIMEOUT_MS, DatabaseReadinessPort, ProbeRequest, TcpProbePort
from .probe import health_resolve_timeout_ms, health_tcp_probe
from .service import DATABASE_SCHEMA_CHECK, DependencyHealthService
from .targets import CACHE_DEPENDENCY, DATABASE_DEPENDENCY, health_collect_dependency_targets

__all__ = [
    "CACHE_DEPENDENCY",
    "DATABASE_DEPENDENCY",
    "DATABASE_SCHEMA_CHECK",
    "DEFAULT_HEALTH_TIMEOUT_MS",
    "DatabaseReadinessPort",
    "DependenciesUnavailableError",
    "DependencyHealthService",
    "HealthProbeError",
    "ProbeConnectionError",
    "ProbeRequest",
    "ProbeTimeoutError",
    "TcpProbePort",
    "health_collect_dependency_targets",
    "health_resolve_timeout_ms",
    "health_tcp_probe",
]
