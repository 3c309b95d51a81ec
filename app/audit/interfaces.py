"""Typed interfaces for audit-trail strategies."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from app.domain import AuditEvent, AuditQuery


class AuditTrailStrategyPort(Protocol):
    """Port definition for pluggable audit-trail sinks."""

    name: str

    def log(self, event: AuditEvent) -> None:
        """Record one audit event."""

    def query(self, query: AuditQuery) -> list[AuditEvent]:
        """Return recorded events matching the query."""

    def purge(self, before: datetime) -> int:
        """Delete events older than `before` and return the deleted count."""
