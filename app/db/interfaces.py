"""Typed interfaces for database-layer services.

All SQL and ORM access must remain in the db package and its submodules.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from app.domain import AuditEvent, AuditQuery, User, UserId


class UserRepositoryPort(Protocol):
    """Port definition for user persistence."""

    def db_user_get_by_id(self, user_id: UserId) -> User | None:
        """Return one user by identifier, or None when missing."""

    def db_user_get_by_email(self, email: str) -> User | None:
        """Return one user by email, or None when missing."""

    def db_user_save(self, user: User) -> User:
        """Insert or update one user by identifier and return the stored row."""

    def db_user_delete_by_id(self, user_id: UserId) -> None:
        """Delete one user by identifier."""


class AuditLogRepositoryPort(Protocol):
    """Port definition for audit-trail persistence."""

    def db_audit_insert(self, event: AuditEvent) -> AuditEvent:
        """Persist one event and return it with its identifier assigned."""

    def db_audit_query(self, query: AuditQuery) -> list[AuditEvent]:
        """Return events matching the query, newest first."""

    def db_audit_purge(self, before: datetime) -> int:
        """Delete events older than `before` and return the deleted count."""
