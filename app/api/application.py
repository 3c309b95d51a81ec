"""FastAPI application factory.

Every route is mounted under the configured API prefix, or at the root when the
prefix is empty.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from app.audit import AuditStrategyResolver
from app.auth import AuthStrategyResolver
from app.config import Configuration
from app.health import DependencyHealthService
from app.users import UserService

from .routers import api_create_auth_router, api_create_health_router, api_create_users_router


def api_route_prefix(api_prefix: str) -> str:
    """Return the mount path for a sanitized API prefix (`""` for root)."""

    return f"/{api_prefix}" if api_prefix else ""


def create_api_application(
    config: Configuration,
    health_service: DependencyHealthService,
    user_service: UserService,
    auth_resolver: AuthStrategyResolver,
    audit_resolver: AuditStrategyResolver,
) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        config: Resolved configuration snapshot.
        health_service: Dependency health aggregator used by health endpoints.
        user_service: User application service.
        auth_resolver: Resolver providing auth strategies.
        audit_resolver: Resolver providing the active audit strategy.

    Returns:
        FastAPI: Application with CORS and every router mounted under the prefix.
    """

    application = FastAPI(title=config.app.name)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.app.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    prefix = api_route_prefix(config.app.api_prefix)

    @application.get(prefix or "/", tags=["foundation"], response_class=PlainTextResponse)
    def foundation_index() -> str:
        """Return the greeting used for bootstrap verification."""

        return "Hello World!"

    application.include_router(api_create_health_router(health_service=health_service), prefix=prefix)
    application.include_router(
        api_create_users_router(user_service=user_service, audit_resolver=audit_resolver), prefix=prefix
    )
    application.include_router(
        api_create_auth_router(auth_resolver=auth_resolver, audit_resolver=audit_resolver), prefix=prefix
    )

    return application
