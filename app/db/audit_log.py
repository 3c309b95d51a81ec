"""Database service for audit-trail persistence."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Any
from uuid import uuid4

from sqlalchemy import Engine, delete, insert, select
from sqlalchemy.exc import SQLAlchemyError

from app.domain import AuditEvent, AuditQuery

from .interfaces import AuditLogRepositoryPort
from .session import db_as_utc
from .tables import audit_log_table

DEFAULT_AUDIT_QUERY_LIMIT = 100


class SQLAlchemyAuditLogService(AuditLogRepositoryPort):
    """SQLAlchemy-backed audit log repository."""

    def __init__(self, engine: Engine):
        if engine is None:
            raise ValueError("engine must not be None")
        self._engine = engine

    def db_audit_insert(self, event: AuditEvent) -> AuditEvent:
        """Persist one audit event.

        Args:
            event: Event to persist; an identifier is generated when absent.

        Returns:
            AuditEvent: Persisted event with identifier.

        Raises:
            RuntimeError: Raised when persistence fails.
        """

        stored_event = event if event.event_id else replace(event, event_id=str(uuid4()))
        try:
            with self._engine.begin() as connection:
                connection.execute(
                    insert(audit_log_table).values(
                        id=stored_event.event_id,
                        occurred_at=stored_event.timestamp,
                        user_id=stored_event.user_id,
                        action=stored_event.action,
                        resource=stored_event.resource,
                        resource_id=stored_event.resource_id,
                        event_metadata=stored_event.metadata,
                        result=stored_event.result,
                        error_message=stored_event.error_message,
                        ip_address=stored_event.ip_address,
                        user_agent=stored_event.user_agent,
                    )
                )
        except SQLAlchemyError as error:
            raise RuntimeError("failed to insert audit event") from error
        return stored_event

    def db_audit_query(self, query: AuditQuery) -> list[AuditEvent]:
        """Return audit events matching all provided filters, newest first.

        Args:
            query: Filter, limit and offset values.

        Returns:
            list[AuditEvent]: Matching events.

        Raises:
            RuntimeError: Raised when the lookup fails.
        """

        statement = select(audit_log_table)
        if query.user_id is not None:
            statement = statement.where(audit_log_table.c.user_id == query.user_id)
        if query.action is not None:
            statement = statement.where(audit_log_table.c.action == query.action)
        if query.resource is not None:
            statement = statement.where(audit_log_table.c.resource == query.resource)
        if query.start_date is not None:
            statement = statement.where(audit_log_table.c.occurred_at >= query.start_date)
        if query.end_date is not None:
            statement = statement.where(audit_log_table.c.occurred_at <= query.end_date)
        statement = (
            statement.order_by(audit_log_table.c.occurred_at.desc())
            .limit(query.limit if query.limit is not None else DEFAULT_AUDIT_QUERY_LIMIT)
            .offset(query.offset or 0)
        )

        try:
            with self._engine.connect() as connection:
                rows = connection.execute(statement).mappings().all()
        except SQLAlchemyError as error:
            raise RuntimeError("failed to query audit events") from error
        return [self._db_map_event(row) for row in rows]

    def db_audit_purge(self, before: datetime) -> int:
        """Delete audit events that occurred before a timestamp.

        Args:
            before: Exclusive upper bound for deleted events.

        Returns:
            int: Number of deleted events.

        Raises:
            RuntimeError: Raised when deletion fails.
        """

        try:
            with self._engine.begin() as connection:
                result = connection.execute(delete(audit_log_table).where(audit_log_table.c.occurred_at < before))
        except SQLAlchemyError as error:
            raise RuntimeError("failed to purge audit events") from error
        return result.rowcount

    @staticmethod
    def _db_map_event(row: Any) -> AuditEvent:
        return AuditEvent(
            event_id=row["id"],
            timestamp=db_as_utc(row["occurred_at"]),
            user_id=row["user_id"],
            action=row["action"],
            resource=row["resource"],
            resource_id=row["resource_id"],
            metadata=row["event_metadata"],
            result=row["result"],
            error_message=row["error_message"],
            ip_address=row["ip_address"],
            user_agent=row["user_agent"],
        )
