"""Database layer package for all SQL and persistence boundaries."""

from .audit_log import DEFAULT_AUDIT_QUERY_LIMIT, SQLAlchemyAuditLogService
from .health import SQLAlchemyDatabaseHealthService
from .interfaces import AuditLogRepositoryPort, UserRepositoryPort
from .session import (
	SQLAlchemyUnitOfWork,
	db_as_utc,
	db_create_engine,
	db_normalize_database_url,
)
from .tables import app_user_table, audit_log_table, metadata
from .users import SQLAlchemyUserRepository

__all__ = [
	"AuditLogRepositoryPort",
	"DEFAULT_AUDIT_QUERY_LIMIT",
	"SQLAlchemyAuditLogService",
	"SQLAlchemyDatabaseHealthService",
	"SQLAlchemyUnitOfWork",
	"SQLAlchemyUserRepository",
	"UserRepositoryPort",
	"app_user_table",
	"audit_log_table",
	"db_as_utc",
	"db_create_engine",
	"db_normalize_database_url",
	"metadata",
]
