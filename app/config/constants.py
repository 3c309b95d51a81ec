"""Universal fallback constants for configuration resolution."""

from typing import Final

PORT_MIN: Final = 1
PORT_MAX: Final = 65535

DEFAULT_APP_NAME: Final = "ukp-backend"
DEFAULT_APPLICATION_HOST: Final = "0.0.0.0"
DEFAULT_API_PREFIX: Final = "api"
DEFAULT_LOG_LEVEL: Final = "info"
DEFAULT_LOG_FORMAT: Final = "pretty"
LOG_FORMATS: Final = ("json", "pretty")

DEVELOPMENT_APP_PORT: Final = 3000
DEV_CONTAINER_APP_PORT: Final = 3000
TEST_APP_PORT: Final = 3001
STAGING_APP_PORT: Final = 8080
PRODUCTION_APP_PORT: Final = 8080

DATABASE_DEFAULT_HOST: Final = "localhost"
DATABASE_DEFAULT_PORT: Final = 5432
DATABASE_DEFAULT_USERNAME: Final = "postgres"
DATABASE_DEFAULT_PASSWORD: Final = "postgres"
DATABASE_DEFAULT_NAME: Final = "ukp"

REDIS_DEFAULT_HOST: Final = "localhost"
REDIS_DEFAULT_PORT: Final = 6379
REDIS_DEFAULT_PASSWORD: Final = ""

SECRET_MIN_LENGTH: Final = 32
DEFAULT_JWT_SECRET: Final = "development-jwt-secret-change-me-before-deploying"
DEFAULT_SESSION_SECRET: Final = "development-session-secret-change-me-before-deploying"
DEFAULT_ADMIN_EMAIL: Final = "admin@example.com"
