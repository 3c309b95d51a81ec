"""Static per-environment configuration overlays.

Overlays are consulted when no explicit environment variable supplies a value.
None of them carry security values; secrets fall back to hardcoded defaults
unless set explicitly.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .constants import (
    DATABASE_DEFAULT_PORT,
    DEFAULT_API_PREFIX,
    DEFAULT_LOG_FORMAT,
    DEV_CONTAINER_APP_PORT,
    DEVELOPMENT_APP_PORT,
    PRODUCTION_APP_PORT,
    REDIS_DEFAULT_PORT,
    STAGING_APP_PORT,
    TEST_APP_PORT,
)
from .environments import Environment
from .models import AppOverrides, CacheOverrides, ConfigurationOverrides, DatabaseOverrides

_LOCAL_ORIGINS = ("http://localhost:3000",)

DEVELOPMENT_OVERRIDES = ConfigurationOverrides(
    app=AppOverrides(
        port=DEVELOPMENT_APP_PORT,
        api_prefix=DEFAULT_API_PREFIX,
        cors_origins=_LOCAL_ORIGINS,
        log_level="debug",
        log_format=DEFAULT_LOG_FORMAT,
    ),
    database=DatabaseOverrides(
        host="localhost",
        port=DATABASE_DEFAULT_PORT,
        username="postgres",
        password="postgres",
        name="ukp_development",
    ),
    cache=CacheOverrides(host="localhost", port=REDIS_DEFAULT_PORT, password=""),
)

DEV_CONTAINER_OVERRIDES = ConfigurationOverrides(
    app=AppOverrides(
        port=DEV_CONTAINER_APP_PORT,
        api_prefix=DEFAULT_API_PREFIX,
        cors_origins=_LOCAL_ORIGINS,
        log_level="debug",
        log_format=DEFAULT_LOG_FORMAT,
    ),
    database=DatabaseOverrides(
        host="postgres",
        port=DATABASE_DEFAULT_PORT,
        username="postgres",
        password="postgres",
        name="ukp_dev_container",
    ),
    cache=CacheOverrides(host="redis", port=REDIS_DEFAULT_PORT, password=""),
)

TESTING_OVERRIDES = ConfigurationOverrides(
    app=AppOverrides(
        port=TEST_APP_PORT,
        api_prefix=DEFAULT_API_PREFIX,
        cors_origins=_LOCAL_ORIGINS,
        log_level="warn",
        log_format=DEFAULT_LOG_FORMAT,
    ),
    database=DatabaseOverrides(
        host="localhost",
        port=DATABASE_DEFAULT_PORT,
        username="postgres",
        password="postgres",
        name="ukp_testing",
    ),
    cache=CacheOverrides(host="localhost", port=REDIS_DEFAULT_PORT, password=""),
)

STAGING_OVERRIDES = ConfigurationOverrides(
    app=AppOverrides(
        port=STAGING_APP_PORT,
        api_prefix=DEFAULT_API_PREFIX,
        cors_origins=("https://staging.example.com",),
        log_level="info",
        log_format="json",
    ),
    database=DatabaseOverrides(
        host="staging-db",
        port=DATABASE_DEFAULT_PORT,
        username="ukp",
        password="staging-password",
        name="ukp_staging",
    ),
    cache=CacheOverrides(host="staging-redis", port=REDIS_DEFAULT_PORT, password="staging-redis-password"),
)

PRODUCTION_OVERRIDES = ConfigurationOverrides(
    app=AppOverrides(
        port=PRODUCTION_APP_PORT,
        api_prefix=DEFAULT_API_PREFIX,
        cors_origins=(),
        log_level="warn",
        log_format="json",
    ),
    database=DatabaseOverrides(
        host="production-db",
        port=DATABASE_DEFAULT_PORT,
        username="ukp",
        password="production-password",
        name="ukp_production",
    ),
    cache=CacheOverrides(
        host="production-redis",
        port=REDIS_DEFAULT_PORT,
        password="production-redis-password",
    ),
)

ENVIRONMENT_OVERRIDES: Mapping[Environment, ConfigurationOverrides] = MappingProxyType(
    {
        Environment.DEVELOPMENT: DEVELOPMENT_OVERRIDES,
        Environment.DEV_CONTAINER: DEV_CONTAINER_OVERRIDES,
        Environment.TESTING: TESTING_OVERRIDES,
        Environment.STAGING: STAGING_OVERRIDES,
        Environment.PRODUCTION: PRODUCTION_OVERRIDES,
    }
)


def config_get_environment_overrides(environment: Environment) -> ConfigurationOverrides:
    """Return the overlay bundle for a resolved environment.

    Args:
        environment: Resolved deployment environment.

    Returns:
        ConfigurationOverrides: Read-only overlay values for that environment.
    """

    return ENVIRONMENT_OVERRIDES[environment]
