"""Authentication strategies."""

from .interfaces import AuthStrategyPort, InvalidCredentialsError
from .local import (
    ADMIN_ROLES,
    JWT_ALGORITHM,
    TOKEN_EXPIRY_SECONDS,
    USER_ROLES,
    LocalAuthStrategy,
)
from .resolver import AuthStrategyResolver

__all__ = [
    "ADMIN_ROLES",
    "AuthStrategyPort",
    "AuthStrategyResolver",
    "InvalidCredentialsError",
    "JWT_ALGORITHM",
    "LocalAuthStrategy",
    "TOKEN_EXPIRY_SECONDS",
    "USER_ROLES",
]
