"""Audit-trail strategies."""

from .console import ConsoleAuditStrategy
from .database import DatabaseAuditStrategy
from .interfaces import AuditTrailStrategyPort
from .resolver import AuditStrategyResolver

__all__ = [
    "AuditStrategyResolver",
    "AuditTrailStrategyPort",
    "ConsoleAuditStrategy",
    "DatabaseAuditStrategy",
]
