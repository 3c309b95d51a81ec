"""Application bootstrap wiring for startup validation and dependency assembly."""

from fastapi import FastAPI

from app.api import create_api_application
from app.audit import AuditStrategyResolver, ConsoleAuditStrategy, DatabaseAuditStrategy
from app.auth import AuthStrategyResolver, LocalAuthStrategy
from app.config import Configuration, config_configure_logging, config_load_configuration
from app.db import (
    SQLAlchemyAuditLogService,
    SQLAlchemyDatabaseHealthService,
    SQLAlchemyUserRepository,
    db_create_engine,
)
from app.health import DependencyHealthService
from app.users import UserService


def bootstrap_create_application(config: Configuration | None = None) -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Args:
        config: Pre-loaded configuration. Loaded from the environment when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        ConfigurationValidationError: Raised when startup configuration validation fails.
    """

    resolved_config = config_load_configuration() if config is None else config
    config_configure_logging(resolved_config.app)

    engine = db_create_engine(database_url=resolved_config.database_url())
    user_repository = SQLAlchemyUserRepository(engine=engine)
    health_service = DependencyHealthService(
        config=resolved_config,
        database_readiness=SQLAlchemyDatabaseHealthService(engine=engine),
    )
    local_auth_strategy = LocalAuthStrategy(
        security=resolved_config.security,
        user_repository=user_repository,
        admin_bootstrap_password=(
            None if resolved_config.is_production() else resolved_config.security.admin_bootstrap_password
        ),
    )
    audit_resolver = AuditStrategyResolver(
        config=resolved_config,
        console_strategy=ConsoleAuditStrategy(),
        database_strategy=DatabaseAuditStrategy(repository=SQLAlchemyAuditLogService(engine=engine)),
    )
    return create_api_application(
        config=resolved_config,
        health_service=health_service,
        user_service=UserService(repository=user_repository),
        auth_resolver=AuthStrategyResolver(local_strategy=local_auth_strategy),
        audit_resolver=audit_resolver,
    )
