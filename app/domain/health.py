"""Health-check value types shared by the health, db and api layers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class HealthStatus(str, Enum):
    """Health verdict taxonomy.

    `DEGRADED` is part of the reported contract but no check produces it yet.
    """

    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"


@dataclass(frozen=True)
class DependencyTarget:
    """Network-addressable dependency derived from configuration.

    Attributes:
        name: Stable dependency name used in reports.
        host: Target host.
        port: Target TCP port.
    """

    name: str
    host: str
    port: int


@dataclass(frozen=True)
class DependencyHealth:
    """Settled outcome of one dependency probe.

    Attributes:
        status: `healthy` or `unhealthy`.
        latency_ms: Duration from dispatch to settle in milliseconds.
        error: Failure message when the probe failed.
    """

    status: HealthStatus
    latency_ms: float | None = None
    error: str | None = None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"status": self.status.value}
        if self.latency_ms is not None:
            payload["latency"] = self.latency_ms
        if self.error is not None:
            payload["error"] = self.error
        return payload


@dataclass(frozen=True)
class DatabaseReadiness:
    """Result of a datastore connectivity and schema-migration check.

    Attributes:
        schema_up_to_date: Whether applied migrations match the migration heads.
        detail: Diagnostic message.
    """

    schema_up_to_date: bool
    detail: str


@dataclass(frozen=True)
class DatabaseHealth:
    """Datastore sub-report of the detailed health report."""

    connected: bool
    schema_up_to_date: bool
    latency_ms: float | None = None
    error: str | None = None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "connected": self.connected,
            "schemaUpToDate": self.schema_up_to_date,
        }
        if self.latency_ms is not None:
            payload["latency"] = self.latency_ms
        if self.error is not None:
            payload["error"] = self.error
        return payload


@dataclass(frozen=True)
class HealthReport:
    """Detailed per-dependency health report computed for one request.

    Attributes:
        status: Overall verdict.
        dependencies: Probe outcome per dependency name in registry order.
        database: Datastore connectivity and schema sub-report.
    """

    status: HealthStatus
    database: DatabaseHealth
    dependencies: dict[str, DependencyHealth] = field(default_factory=dict)

    def to_payload(self) -> dict[str, Any]:
        """Render the report as a JSON-compatible payload."""

        return {
            "status": self.status.value,
            "dependencies": {name: health.to_payload() for name, health in self.dependencies.items()},
            "database": self.database.to_payload(),
        }
