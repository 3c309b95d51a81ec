"""Startup validation schema for raw environment variables.

Validation collects every violation in one pass; callers abort startup when any
violation is reported. Unrecognized variables are ignored.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Annotated, Any, Literal, Mapping

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, TypeAdapter, ValidationError, field_validator
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError

from .constants import (
    DATABASE_DEFAULT_HOST,
    DATABASE_DEFAULT_NAME,
    DATABASE_DEFAULT_PASSWORD,
    DATABASE_DEFAULT_PORT,
    DATABASE_DEFAULT_USERNAME,
    DEFAULT_ADMIN_EMAIL,
    DEFAULT_API_PREFIX,
    DEFAULT_APPLICATION_HOST,
    DEFAULT_JWT_SECRET,
    DEFAULT_LOG_FORMAT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_SESSION_SECRET,
    PORT_MAX,
    PORT_MIN,
    REDIS_DEFAULT_HOST,
    REDIS_DEFAULT_PASSWORD,
    REDIS_DEFAULT_PORT,
    SECRET_MIN_LENGTH,
)
from .environments import DEFAULT_ENVIRONMENT, ENVIRONMENT_NAMES
from .errors import ConfigurationValidationError, ConfigurationViolation

_DECIMAL_NUMBER_PATTERN = re.compile(r"[+-]?\d+(\.\d+)?", re.ASCII)


def _config_parse_decimal_port(value: Any) -> Any:
    if not isinstance(value, str):
        return value
    stripped = value.strip()
    if not _DECIMAL_NUMBER_PATTERN.fullmatch(stripped):
        raise ValueError("must be a decimal number")
    return float(stripped) if "." in stripped else int(stripped)


PortNumber = Annotated[int, BeforeValidator(_config_parse_decimal_port), Field(ge=PORT_MIN, le=PORT_MAX)]
PORT_ADAPTER: TypeAdapter[int] = TypeAdapter(PortNumber)


class EnvironmentSchema(BaseModel):
    """Type and range constraints for every recognized environment variable.

    Field aliases are the environment variable names, so validation errors are
    reported against the variable an operator has to fix.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    node_env: str = Field(default=DEFAULT_ENVIRONMENT.value, alias="NODE_ENV")
    host: str = Field(default=DEFAULT_APPLICATION_HOST, alias="HOST", min_length=1)
    port: PortNumber | None = Field(default=None, alias="PORT")
    api_prefix: str = Field(default=DEFAULT_API_PREFIX, alias="API_PREFIX")
    cors_origins: str | None = Field(default=None, alias="CORS_ORIGINS")
    log_level: str = Field(default=DEFAULT_LOG_LEVEL, alias="LOG_LEVEL", min_length=1)
    log_format: Literal["json", "pretty"] = Field(default=DEFAULT_LOG_FORMAT, alias="LOG_FORMAT")
    db_host: str = Field(default=DATABASE_DEFAULT_HOST, alias="DB_HOST", min_length=1)
    db_port: PortNumber = Field(default=DATABASE_DEFAULT_PORT, alias="DB_PORT")
    db_username: str = Field(default=DATABASE_DEFAULT_USERNAME, alias="DB_USERNAME", min_length=1)
    db_password: str = Field(default=DATABASE_DEFAULT_PASSWORD, alias="DB_PASSWORD", repr=False)
    db_name: str = Field(default=DATABASE_DEFAULT_NAME, alias="DB_NAME", min_length=1)
    db_url: str | None = Field(default=None, alias="DB_URL", repr=False)
    redis_host: str = Field(default=REDIS_DEFAULT_HOST, alias="REDIS_HOST", min_length=1)
    redis_port: PortNumber = Field(default=REDIS_DEFAULT_PORT, alias="REDIS_PORT")
    redis_password: str = Field(default=REDIS_DEFAULT_PASSWORD, alias="REDIS_PASSWORD", repr=False)
    jwt_secret: str = Field(
        default=DEFAULT_JWT_SECRET, alias="JWT_SECRET", min_length=SECRET_MIN_LENGTH, repr=False
    )
    session_secret: str = Field(
        default=DEFAULT_SESSION_SECRET, alias="SESSION_SECRET", min_length=SECRET_MIN_LENGTH, repr=False
    )
    api_key: str | None = Field(default=None, alias="API_KEY", repr=False)
    admin_email: str = Field(default=DEFAULT_ADMIN_EMAIL, alias="ADMIN_EMAIL", min_length=1)
    admin_bootstrap_password: str | None = Field(default=None, alias="ADMIN_BOOTSTRAP_PASSWORD", repr=False)

    @field_validator("node_env")
    @classmethod
    def _validate_environment_name(cls, value: str) -> str:
        if value not in ENVIRONMENT_NAMES:
            raise ValueError(f"must be one of: {', '.join(ENVIRONMENT_NAMES)}")
        return value

    @field_validator("db_url")
    @classmethod
    def _validate_database_url(cls, value: str | None) -> str | None:
        if value is None:
            return value
        try:
            make_url(value)
        except ArgumentError as error:
            raise ValueError("must be a valid connection URI") from error
        return value


@dataclass(frozen=True)
class ConfigValidationResult:
    """Outcome of validating one raw environment mapping.

    Attributes:
        errors: Every violation found; empty when the input is valid.
        values: Validated values with schema defaults applied, keyed by
            variable name. Empty when `errors` is not empty.
    """

    errors: tuple[ConfigurationViolation, ...]
    values: Mapping[str, Any] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def config_validate_environment(raw_env: Mapping[str, str]) -> ConfigValidationResult:
    """Validate raw environment variables against the startup schema.

    Args:
        raw_env: Environment variable mapping to validate.

    Returns:
        ConfigValidationResult: All violations, or defaulted values when valid.
    """

    try:
        validated = EnvironmentSchema.model_validate(dict(raw_env))
    except ValidationError as error:
        violations = tuple(
            ConfigurationViolation(
                path=tuple(str(part) for part in detail["loc"]),
                message=detail["msg"],
            )
            for detail in error.errors()
        )
        return ConfigValidationResult(errors=violations)
    return ConfigValidationResult(errors=(), values=validated.model_dump(by_alias=True))


def config_assert_valid_environment(raw_env: Mapping[str, str]) -> Mapping[str, Any]:
    """Validate raw environment variables and raise on any violation.

    Args:
        raw_env: Environment variable mapping to validate.

    Returns:
        Mapping[str, Any]: Validated values with schema defaults applied.

    Raises:
        ConfigurationValidationError: Raised with every violation when invalid.
    """

    result = config_validate_environment(raw_env)
    if result.errors:
        raise ConfigurationValidationError(result.errors)
    return result.values
