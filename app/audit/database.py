"""Audit strategy persisting events to the `audit_log` table."""

from __future__ import annotations

from datetime import datetime

from app.db import AuditLogRepositoryPort
from app.domain import AuditEvent, AuditQuery

from .interfaces import AuditTrailStrategyPort


class DatabaseAuditStrategy(AuditTrailStrategyPort):
    """Delegate audit-trail operations to the audit log repository."""

    name = "database"

    def __init__(self, repository: AuditLogRepositoryPort):
        """Initialize database audit strategy.

        Args:
            repository: Audit log persistence service.

        Raises:
            ValueError: Raised when repository is None.
        """

        if repository is None:
            raise ValueError("repository must not be None")
        self._repository = repository

    def log(self, event: AuditEvent) -> None:
        """Persist one event.

        Raises:
            RuntimeError: Raised when persistence fails.
        """

        self._repository.db_audit_insert(event)

    def query(self, query: AuditQuery) -> list[AuditEvent]:
        return self._repository.db_audit_query(query)

    def purge(self, before: datetime) -> int:
        return self._repository.db_audit_purge(before)
