"""Dependency health aggregation over concurrent, independently settled checks.

Every check of one invocation is dispatched at once and joined with
`asyncio.gather(..., return_exceptions=True)`, so a failing branch never
cancels or hides its siblings. Nothing is cached between invocations.
"""

from __future__ import annotations

import asyncio
import time

import structlog

from app.config import Configuration
from app.domain import (
    DatabaseHealth,
    DatabaseReadiness,
    DependencyHealth,
    DependencyTarget,
    HealthReport,
    HealthStatus,
)

from .errors import DependenciesUnavailableError
from .interfaces import DEFAULT_HEALTH_TIMEOUT_MS, DatabaseReadinessPort, ProbeRequest, TcpProbePort
from .probe import health_tcp_probe
from .targets import health_collect_dependency_targets

DATABASE_SCHEMA_CHECK = "database-schema"

logger = structlog.get_logger(__name__)


def _health_elapsed_ms(started_at: float) -> float:
    return round((time.perf_counter() - started_at) * 1000, 2)


class DependencyHealthService:
    """Aggregate dependency probes into a pass/fail verdict or a detailed report."""

    def __init__(
        self,
        config: Configuration,
        database_readiness: DatabaseReadinessPort,
        tcp_probe: TcpProbePort = health_tcp_probe,
        timeout_ms: float = DEFAULT_HEALTH_TIMEOUT_MS,
    ):
        """Initialize the aggregator.

        Args:
            config: Read-only configuration snapshot providing dependency targets.
            database_readiness: Datastore connectivity and schema check.
            tcp_probe: Reachability probe used for every dependency target.
            timeout_ms: Per-probe timeout in milliseconds, also bounding the
                datastore readiness check.

        Raises:
            ValueError: Raised when a required collaborator is None.
        """

        if config is None:
            raise ValueError("config must not be None")
        if database_readiness is None:
            raise ValueError("database_readiness must not be None")
        self._config = config
        self._database_readiness = database_readiness
        self._tcp_probe = tcp_probe
        self._timeout_ms = timeout_ms

    async def health_assert_dependencies_healthy(self) -> None:
        """Probe every dependency and the datastore schema concurrently.

        Returns:
            None: Completes when every check succeeded.

        Raises:
            DependenciesUnavailableError: Raised after all checks settled when
                at least one failed, naming every failed check in registry
                order followed by `database-schema`.
        """

        targets = health_collect_dependency_targets(self._config)
        check_names = [target.name for target in targets] + [DATABASE_SCHEMA_CHECK]
        results = await asyncio.gather(
            *(self._health_check_dependency(target) for target in targets),
            self._health_check_database_schema(),
            return_exceptions=True,
        )

        failed_dependencies = tuple(
            name for name, result in zip(check_names, results) if isinstance(result, BaseException)
        )
        if failed_dependencies:
            raise DependenciesUnavailableError(failed_dependencies)

    async def health_get_detailed_report(self) -> HealthReport:
        """Build a per-dependency report with latency and error details.

        Returns:
            HealthReport: `unhealthy` when any probe failed, the datastore is
            disconnected, or its schema is behind; otherwise `healthy`.
        """

        targets = health_collect_dependency_targets(self._config)
        dependency_results, database_health = await asyncio.gather(
            asyncio.gather(*(self._health_measure_dependency(target) for target in targets)),
            self._health_measure_database(),
        )
        dependencies = {target.name: result for target, result in zip(targets, dependency_results)}

        overall_status = HealthStatus.HEALTHY
        if (
            any(result.status is not HealthStatus.HEALTHY for result in dependencies.values())
            or not database_health.connected
            or not database_health.schema_up_to_date
        ):
            overall_status = HealthStatus.UNHEALTHY

        return HealthReport(status=overall_status, dependencies=dependencies, database=database_health)

    async def _health_check_dependency(self, target: DependencyTarget) -> None:
        try:
            await self._tcp_probe(
                ProbeRequest(host=target.host, port=target.port, timeout_ms=self._timeout_ms, label=target.name)
            )
        except Exception as error:
            logger.error("dependency_check_failed", dependency=target.name, error=str(error))
            raise

    async def _health_read_database_readiness(self) -> DatabaseReadiness:
        try:
            return await asyncio.wait_for(
                asyncio.to_thread(self._database_readiness.db_check_readiness),
                timeout=self._timeout_ms / 1000,
            )
        except asyncio.TimeoutError as error:
            raise ConnectionError(f"database readiness check timed out after {self._timeout_ms:g}ms") from error

    async def _health_check_database_schema(self) -> None:
        try:
            readiness = await self._health_read_database_readiness()
        except Exception as error:
            logger.error("dependency_check_failed", dependency=DATABASE_SCHEMA_CHECK, error=str(error))
            raise
        if not readiness.schema_up_to_date:
            logger.error("dependency_check_failed", dependency=DATABASE_SCHEMA_CHECK, error=readiness.detail)
            raise RuntimeError(readiness.detail)

    async def _health_measure_dependency(self, target: DependencyTarget) -> DependencyHealth:
        started_at = time.perf_counter()
        try:
            await self._health_check_dependency(target)
        except Exception as error:
            return DependencyHealth(
                status=HealthStatus.UNHEALTHY,
                latency_ms=_health_elapsed_ms(started_at),
                error=str(error),
            )
        return DependencyHealth(status=HealthStatus.HEALTHY, latency_ms=_health_elapsed_ms(started_at))

    async def _health_measure_database(self) -> DatabaseHealth:
        started_at = time.perf_counter()
        try:
            readiness = await self._health_read_database_readiness()
        except Exception as error:
            logger.error("database_readiness_failed", error=str(error))
            return DatabaseHealth(
                connected=False,
                schema_up_to_date=False,
                latency_ms=_health_elapsed_ms(started_at),
                error=str(error),
            )
        return DatabaseHealth(
            connected=True,
            schema_up_to_date=readiness.schema_up_to_date,
            latency_ms=_health_elapsed_ms(started_at),
            error=None if readiness.schema_up_to_date else readiness.detail,
        )
