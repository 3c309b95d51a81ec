"""Helpers for recording API actions with the active audit strategy."""

from __future__ import annotations

import structlog
from fastapi import Request

from app.audit import AuditStrategyResolver
from app.domain import AuditEvent

logger = structlog.get_logger(__name__)


def api_audit_request_context(request: Request) -> dict[str, str | None]:
    """Extract client address and user agent for audit events."""

    return {
        "ip_address": request.client.host if request.client else None,
        "user_agent": request.headers.get("user-agent"),
    }


def api_record_audit_event(audit_resolver: AuditStrategyResolver, event: AuditEvent) -> None:
    """Record one event; a failing audit sink is logged without failing the request.

    Args:
        audit_resolver: Resolver providing the active audit strategy.
        event: Event to record.
    """

    try:
        audit_resolver.get_active().log(event)
    except RuntimeError as error:
        logger.error("audit_event_not_recorded", audit_action=event.action, error=str(error))
