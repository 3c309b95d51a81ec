"""Deployment environment enumeration and total environment-name resolution."""

from __future__ import annotations

from enum import Enum


class Environment(str, Enum):
    """Closed set of deployment environments the service can run in."""

    DEVELOPMENT = "development"
    DEV_CONTAINER = "dev-container"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


ENVIRONMENT_NAMES: tuple[str, ...] = tuple(member.value for member in Environment)
DEFAULT_ENVIRONMENT = Environment.DEVELOPMENT


def config_resolve_environment(raw_value: str | None) -> Environment:
    """Map a raw environment name to an `Environment` member.

    Matching is exact and case-sensitive. Absent or unknown values resolve to
    `DEFAULT_ENVIRONMENT`; this function never raises.

    Args:
        raw_value: Raw value of `NODE_ENV`, or None when unset.

    Returns:
        Environment: Matching member or the default member.
    """

    if raw_value and raw_value in ENVIRONMENT_NAMES:
        return Environment(raw_value)
    return DEFAULT_ENVIRONMENT


def config_get_env_file_paths(environment: Environment) -> tuple[str, ...]:
    """Return dotenv file names for an environment, highest priority first.

    Args:
        environment: Resolved deployment environment.

    Returns:
        tuple[str, ...]: Relative dotenv file names.
    """

    return (
        f".env.{environment.value}.local",
        f".env.{environment.value}",
        ".env.local",
        ".env",
    )
