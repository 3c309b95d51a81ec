"""Audit strategy that writes events to the structured application log."""

from __future__ import annotations

from datetime import datetime

import structlog

from app.domain import AuditEvent, AuditQuery

from .interfaces import AuditTrailStrategyPort

audit_logger = structlog.get_logger("audit_trail")


class ConsoleAuditStrategy(AuditTrailStrategyPort):
    """Log audit events; the log stream is write-only, so nothing can be queried."""

    name = "console"

    def log(self, event: AuditEvent) -> None:
        fields = {
            "audit_action": event.action,
            "resource": event.resource,
            "resource_id": event.resource_id,
            "user_id": event.user_id,
            "result": event.result,
            "occurred_at": event.timestamp.isoformat(),
            "metadata": event.metadata,
            "ip_address": event.ip_address,
            "user_agent": event.user_agent,
        }
        if event.result == "failure":
            audit_logger.error("audit_event", error_message=event.error_message, **fields)
            return
        audit_logger.info("audit_event", **fields)

    def query(self, query: AuditQuery) -> list[AuditEvent]:
        audit_logger.warning("audit_query_unsupported", provider=self.name)
        return []

    def purge(self, before: datetime) -> int:
        audit_logger.warning("audit_purge_unsupported", provider=self.name, before=before.isoformat())
        return 0
