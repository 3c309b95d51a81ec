"""Audit-trail value types exchanged with audit strategies."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Literal

AuditProvider = Literal["console", "database", "elasticsearch", "file"]
AuditResult = Literal["success", "failure"]


@dataclass(frozen=True)
class AuditEvent:
    """One audited action.

    Attributes:
        action: Performed action, e.g. `user.create`.
        resource: Affected resource type.
        result: `success` or `failure`.
        timestamp: Event time (UTC).
        event_id: Identifier assigned on persistence when absent.
        user_id: Acting user identifier.
        resource_id: Affected resource identifier.
        metadata: Additional structured context.
        error_message: Failure description.
        ip_address: Client address.
        user_agent: Client user agent.
    """

    action: str
    resource: str
    result: AuditResult
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    event_id: str | None = None
    user_id: str | None = None
    resource_id: str | None = None
    metadata: dict[str, Any] | None = None
    error_message: str | None = None
    ip_address: str | None = None
    user_agent: str | None = None


@dataclass(frozen=True)
class AuditQuery:
    """Filter for audit-trail lookups."""

    user_id: str | None = None
    action: str | None = None
    resource: str | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    limit: int | None = None
    offset: int | None = None
