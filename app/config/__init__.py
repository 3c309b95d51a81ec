"""Configuration package for environment resolution, validation and startup loading."""

from .builder import (
    config_build_configuration,
    config_first_present,
    config_parse_origins,
    config_parse_port,
    config_sanitize_prefix,
)
from .environments import (
    DEFAULT_ENVIRONMENT,
    ENVIRONMENT_NAMES,
    Environment,
    config_get_env_file_paths,
    config_resolve_environment,
)
from .errors import ConfigurationValidationError, ConfigurationViolation, SettingsLoadError
from .loader import config_load_configuration, config_load_database_url, config_read_environment
from .log_setup import config_configure_logging, config_resolve_log_level
from .models import (
    AppConfig,
    AppOverrides,
    CacheConfig,
    CacheOverrides,
    Configuration,
    ConfigurationOverrides,
    DatabaseConfig,
    DatabaseOverrides,
    SecurityConfig,
    SecurityOverrides,
)
from .overlays import ENVIRONMENT_OVERRIDES, config_get_environment_overrides
from .validation import (
    ConfigValidationResult,
    EnvironmentSchema,
    config_assert_valid_environment,
    config_validate_environment,
)

__all__ = [
    "AppConfig",
    "AppOverrides",
    "CacheConfig",
    "CacheOverrides",
    "ConfigValidationResult",
    "Configuration",
    "ConfigurationOverrides",
    "ConfigurationValidationError",
    "ConfigurationViolation",
    "DEFAULT_ENVIRONMENT",
    "DatabaseConfig",
    "DatabaseOverrides",
    "ENVIRONMENT_NAMES",
    "ENVIRONMENT_OVERRIDES",
    "Environment",
    "EnvironmentSchema",
    "SecurityConfig",
    "SecurityOverrides",
    "SettingsLoadError",
    "config_assert_valid_environment",
    "config_build_configuration",
    "config_configure_logging",
    "config_first_present",
    "config_get_env_file_paths",
    "config_get_environment_overrides",
    "config_load_configuration",
    "config_load_database_url",
    "config_parse_origins",
    "config_parse_port",
    "config_read_environment",
    "config_resolve_environment",
    "config_resolve_log_level",
    "config_sanitize_prefix",
    "config_validate_environment",
]
