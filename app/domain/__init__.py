"""Domain models used across application layer boundaries."""

from .audit import AuditEvent, AuditProvider, AuditQuery, AuditResult
from .auth import AuthCredentials, AuthProvider, AuthToken, AuthUser
from .errors import StrategyNotFoundError
from .health import (
    DatabaseHealth,
    DatabaseReadiness,
    DependencyHealth,
    DependencyTarget,
    HealthReport,
    HealthStatus,
)
from .users import InvalidUserIdError, User, UserId, UserStatus

__all__ = [
    "AuditEvent",
    "AuditProvider",
    "AuditQuery",
    "AuditResult",
    "AuthCredentials",
    "AuthProvider",
    "AuthToken",
    "AuthUser",
    "DatabaseHealth",
    "DatabaseReadiness",
    "DependencyHealth",
    "DependencyTarget",
    "HealthReport",
    "HealthStatus",
    "InvalidUserIdError",
    "StrategyNotFoundError",
    "User",
    "UserId",
    "UserStatus",
]
