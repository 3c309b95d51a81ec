"""Tests for audit-trail strategies and the audit strategy resolver."""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import Engine, create_engine
from sqlalchemy.pool import StaticPool
from structlog.testing import capture_logs

from app.audit import AuditStrategyResolver, ConsoleAuditStrategy, DatabaseAuditStrategy
from app.config import config_build_configuration
from app.db import SQLAlchemyAuditLogService, metadata
from app.domain import AuditEvent, AuditQuery, StrategyNotFoundError


def _build_engine() -> Engine:
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    metadata.create_all(engine)
    return engine


def test_audit_console_logs_success_at_info_and_failure_at_error() -> None:
    """Route events to the audit_trail logger by result."""

    strategy = ConsoleAuditStrategy()

    with capture_logs() as captured_logs:
        strategy.log(AuditEvent(action="user.create", resource="user", result="success", resource_id="user-1"))
        strategy.log(
            AuditEvent(action="auth.login", resource="session", result="failure", error_message="Invalid credentials")
        )

    assert [entry["log_level"] for entry in captured_logs] == ["info", "error"]
    assert captured_logs[0]["audit_action"] == "user.create"
    assert captured_logs[0]["resource_id"] == "user-1"
    assert captured_logs[1]["error_message"] == "Invalid credentials"


def test_audit_console_query_and_purge_are_unsupported() -> None:
    """Return empty results with a warning for read and purge operations."""

    strategy = ConsoleAuditStrategy()

    with capture_logs() as captured_logs:
        assert strategy.query(AuditQuery(user_id="user-1")) == []
        assert strategy.purge(datetime.now(timezone.utc)) == 0

    assert [entry["log_level"] for entry in captured_logs] == ["warning", "warning"]


def test_audit_database_strategy_persists_queries_and_purges() -> None:
    """Delegate every operation to the audit log table.

    Returns:
        None: Assertions validate persistence through the strategy.

    Raises:
        AssertionError: Raised when stored events are not returned.
    """

    strategy = DatabaseAuditStrategy(repository=SQLAlchemyAuditLogService(engine=_build_engine()))
    base_time = datetime(2026, 5, 1, tzinfo=timezone.utc)
    strategy.log(AuditEvent(action="user.create", resource="user", result="success", timestamp=base_time))
    strategy.log(
        AuditEvent(action="user.create", resource="user", result="success", timestamp=base_time + timedelta(days=1))
    )

    events = strategy.query(AuditQuery(action="user.create"))

    assert [event.timestamp for event in events] == [base_time + timedelta(days=1), base_time]
    assert strategy.purge(base_time + timedelta(hours=1)) == 1
    assert len(strategy.query(AuditQuery())) == 1


def test_audit_resolver_uses_console_outside_production() -> None:
    """Activate the console strategy in development."""

    console_strategy = ConsoleAuditStrategy()
    database_strategy = DatabaseAuditStrategy(repository=SQLAlchemyAuditLogService(engine=_build_engine()))

    resolver = AuditStrategyResolver(
        config=config_build_configuration({}),
        console_strategy=console_strategy,
        database_strategy=database_strategy,
    )

    assert resolver.get_active() is console_strategy
    assert resolver.resolve("database") is database_strategy
    assert resolver.get_available_providers() == ("console", "database")


def test_audit_resolver_uses_database_in_production() -> None:
    """Activate the database strategy in production and require it there."""

    production_config = config_build_configuration({"NODE_ENV": "production"})
    database_strategy = DatabaseAuditStrategy(repository=SQLAlchemyAuditLogService(engine=_build_engine()))

    resolver = AuditStrategyResolver(
        config=production_config,
        console_strategy=ConsoleAuditStrategy(),
        database_strategy=database_strategy,
    )

    assert resolver.get_active() is database_strategy
    with pytest.raises(ValueError):
        AuditStrategyResolver(config=production_config, console_strategy=ConsoleAuditStrategy())


def test_audit_resolver_switches_active_provider() -> None:
    """Switch to registered providers and reject unknown ones."""

    console_strategy = ConsoleAuditStrategy()
    database_strategy = DatabaseAuditStrategy(repository=SQLAlchemyAuditLogService(engine=_build_engine()))
    resolver = AuditStrategyResolver(
        config=config_build_configuration({}),
        console_strategy=console_strategy,
        database_strategy=database_strategy,
    )

    resolver.set_active("database")

    assert resolver.get_active() is database_strategy
    with pytest.raises(StrategyNotFoundError):
        resolver.set_active("elasticsearch")
    assert resolver.get_active() is database_strategy
