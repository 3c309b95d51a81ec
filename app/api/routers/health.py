"""Health endpoint router composition for dependency checks."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from app.health import DependenciesUnavailableError, DependencyHealthService


def api_create_health_router(health_service: DependencyHealthService) -> APIRouter:
    """Create health-check router exposing simple and detailed dependency status.

    Args:
        health_service: Dependency health aggregator.

    Returns:
        APIRouter: Router exposing `/health/config` and `/health/detailed`.

    Raises:
        ValueError: Raised when health_service is invalid.
    """

    if health_service is None:
        raise ValueError("health_service must not be None")

    router = APIRouter(prefix="/health", tags=["health"])

    @router.get("/config")
    async def api_health_config() -> JSONResponse:
        """Return pass/fail status across every configured dependency.

        Returns:
            JSONResponse: `ok` when all checks pass, `unavailable` with 503 otherwise.
        """

        try:
            await health_service.health_assert_dependencies_healthy()
        except DependenciesUnavailableError as error:
            payload = {"status": "unavailable", "message": str(error)}
            return JSONResponse(content=payload, status_code=status.HTTP_503_SERVICE_UNAVAILABLE)
        return JSONResponse(content={"status": "ok"}, status_code=status.HTTP_200_OK)

    @router.get("/detailed")
    async def api_health_detailed() -> JSONResponse:
        """Return per-dependency status with latency and error details."""

        report = await health_service.health_get_detailed_report()
        return JSONResponse(content=report.to_payload(), status_code=status.HTTP_200_OK)

    return router
