"""Layered configuration builder.

Each field resolves from an ordered list of optional sources: explicit
environment variable, environment overlay value, hardcoded fallback constant.
Numeric and enumerated inputs that fail parsing count as absent.
"""

from __future__ import annotations

import os
from typing import Mapping, TypeVar

from pydantic import ValidationError

from .constants import (
    DATABASE_DEFAULT_HOST,
    DATABASE_DEFAULT_NAME,
    DATABASE_DEFAULT_PASSWORD,
    DATABASE_DEFAULT_PORT,
    DATABASE_DEFAULT_USERNAME,
    DEFAULT_ADMIN_EMAIL,
    DEFAULT_API_PREFIX,
    DEFAULT_APP_NAME,
    DEFAULT_APPLICATION_HOST,
    DEFAULT_JWT_SECRET,
    DEFAULT_LOG_FORMAT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_SESSION_SECRET,
    DEVELOPMENT_APP_PORT,
    LOG_FORMATS,
    REDIS_DEFAULT_HOST,
    REDIS_DEFAULT_PASSWORD,
    REDIS_DEFAULT_PORT,
)
from .environments import Environment, config_resolve_environment
from .models import (
    AppConfig,
    CacheConfig,
    Configuration,
    ConfigurationOverrides,
    DatabaseConfig,
    SecurityConfig,
)
from .overlays import config_get_environment_overrides
from .validation import PORT_ADAPTER

_T = TypeVar("_T")


def config_first_present(*candidates: _T | None) -> _T | None:
    """Return the first candidate that is not None.

    Args:
        candidates: Optional values ordered from highest to lowest priority.

    Returns:
        _T | None: First present candidate, or None when all are absent.
    """

    for candidate in candidates:
        if candidate is not None:
            return candidate
    return None


def _config_resolve(*candidates: _T | None, fallback: _T) -> _T:
    resolved = config_first_present(*candidates)
    return fallback if resolved is None else resolved


def config_parse_port(value: str | None) -> int | None:
    """Parse a port value, treating malformed or out-of-range input as absent.

    Uses the same port rules as startup validation, so a value accepted there
    is never dropped here.

    Args:
        value: Raw variable value.

    Returns:
        int | None: Port within `[PORT_MIN, PORT_MAX]`, or None.
    """

    if not value:
        return None
    try:
        return PORT_ADAPTER.validate_python(value)
    except ValidationError:
        return None


def config_parse_origins(value: str | None) -> tuple[str, ...] | None:
    """Split a comma-separated origin list into trimmed, non-empty entries.

    Args:
        value: Raw `CORS_ORIGINS` value.

    Returns:
        tuple[str, ...] | None: Origins in declaration order, or None when unset.
    """

    if value is None:
        return None
    return tuple(origin.strip() for origin in value.split(",") if origin.strip())


def config_sanitize_prefix(value: str) -> str:
    """Strip leading and trailing slashes from an API prefix."""

    return value.strip("/")


def _config_parse_log_format(value: str | None) -> str | None:
    return value if value in LOG_FORMATS else None


def _config_build_app(
    environ: Mapping[str, str], environment: Environment, overrides: ConfigurationOverrides
) -> AppConfig:
    app_overrides = overrides.app
    return AppConfig(
        name=DEFAULT_APP_NAME,
        environment=environment,
        port=_config_resolve(config_parse_port(environ.get("PORT")), app_overrides.port, fallback=DEVELOPMENT_APP_PORT),
        api_prefix=config_sanitize_prefix(
            _config_resolve(environ.get("API_PREFIX"), app_overrides.api_prefix, fallback=DEFAULT_API_PREFIX)
        ),
        cors_origins=_config_resolve(
            config_parse_origins(environ.get("CORS_ORIGINS")), app_overrides.cors_origins, fallback=()
        ),
        log_level=_config_resolve(environ.get("LOG_LEVEL"), app_overrides.log_level, fallback=DEFAULT_LOG_LEVEL),
        log_format=_config_resolve(
            _config_parse_log_format(environ.get("LOG_FORMAT")),
            _config_parse_log_format(app_overrides.log_format),
            fallback=DEFAULT_LOG_FORMAT,
        ),
        host=_config_resolve(environ.get("HOST"), fallback=DEFAULT_APPLICATION_HOST),
    )


def _config_build_database(environ: Mapping[str, str], overrides: ConfigurationOverrides) -> DatabaseConfig:
    database_overrides = overrides.database
    return DatabaseConfig(
        host=_config_resolve(environ.get("DB_HOST"), database_overrides.host, fallback=DATABASE_DEFAULT_HOST),
        port=_config_resolve(
            config_parse_port(environ.get("DB_PORT")), database_overrides.port, fallback=DATABASE_DEFAULT_PORT
        ),
        username=_config_resolve(
            environ.get("DB_USERNAME"), database_overrides.username, fallback=DATABASE_DEFAULT_USERNAME
        ),
        password=_config_resolve(
            environ.get("DB_PASSWORD"), database_overrides.password, fallback=DATABASE_DEFAULT_PASSWORD
        ),
        name=_config_resolve(environ.get("DB_NAME"), database_overrides.name, fallback=DATABASE_DEFAULT_NAME),
        url=config_first_present(environ.get("DB_URL"), database_overrides.url),
    )


def _config_build_cache(environ: Mapping[str, str], overrides: ConfigurationOverrides) -> CacheConfig:
    cache_overrides = overrides.cache
    return CacheConfig(
        host=_config_resolve(environ.get("REDIS_HOST"), cache_overrides.host, fallback=REDIS_DEFAULT_HOST),
        port=_config_resolve(
            config_parse_port(environ.get("REDIS_PORT")), cache_overrides.port, fallback=REDIS_DEFAULT_PORT
        ),
        password=_config_resolve(
            environ.get("REDIS_PASSWORD"), cache_overrides.password, fallback=REDIS_DEFAULT_PASSWORD
        ),
    )


def _config_build_security(environ: Mapping[str, str], overrides: ConfigurationOverrides) -> SecurityConfig:
    security_overrides = overrides.security
    return SecurityConfig(
        jwt_secret=_config_resolve(
            environ.get("JWT_SECRET"), security_overrides.jwt_secret, fallback=DEFAULT_JWT_SECRET
        ),
        session_secret=_config_resolve(
            environ.get("SESSION_SECRET"), security_overrides.session_secret, fallback=DEFAULT_SESSION_SECRET
        ),
        api_key=config_first_present(environ.get("API_KEY"), security_overrides.api_key),
        admin_email=_config_resolve(environ.get("ADMIN_EMAIL"), fallback=DEFAULT_ADMIN_EMAIL),
        admin_bootstrap_password=environ.get("ADMIN_BOOTSTRAP_PASSWORD") or None,
    )


def config_build_configuration(environ: Mapping[str, str] | None = None) -> Configuration:
    """Build the immutable configuration snapshot.

    Args:
        environ: Environment variable mapping. Defaults to the process environment.

    Returns:
        Configuration: Resolved snapshot with application, datastore, cache and
        security sections.
    """

    source = os.environ if environ is None else environ
    environment = config_resolve_environment(source.get("NODE_ENV"))
    overrides = config_get_environment_overrides(environment)
    return Configuration(
        app=_config_build_app(source, environment, overrides),
        database=_config_build_database(source, overrides),
        cache=_config_build_cache(source, overrides),
        security=_config_build_security(source, overrides),
    )
