"""Regression tests for the Alembic migration chain."""

from __future__ import annotations

from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

from app.db import SQLAlchemyDatabaseHealthService

_PROJECT_ROOT = Path(__file__).resolve().parents[1]


def _migration_build_config() -> Config:
    """Build Alembic config pointing at the project migration scripts.

    Returns:
        Config: Alembic configuration.
    """

    alembic_config = Config(str(_PROJECT_ROOT / "alembic.ini"))
    alembic_config.set_main_option("script_location", str(_PROJECT_ROOT / "alembic"))
    return alembic_config


def test_migrations_apply_are_idempotent_and_revert(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Apply migrations on a fresh DB, re-run them, then downgrade to base.

    Returns:
        None: Assertions validate migration behavior.

    Raises:
        AssertionError: Raised when expected migration artifacts are missing.
    """

    database_url = f"sqlite+pysqlite:///{tmp_path / 'migrations.db'}"
    monkeypatch.setenv("DB_URL", database_url)
    monkeypatch.chdir(tmp_path)

    alembic_config = _migration_build_config()
    command.upgrade(alembic_config, "head")
    command.upgrade(alembic_config, "head")

    verification_engine = create_engine(database_url)
    try:
        inspector = inspect(verification_engine)
        assert {"app_user", "audit_log", "alembic_version"}.issubset(set(inspector.get_table_names()))
        assert "ix_audit_log_occurred_at" in {index["name"] for index in inspector.get_indexes("audit_log")}
        assert SQLAlchemyDatabaseHealthService(engine=verification_engine).db_check_readiness().schema_up_to_date

        command.downgrade(alembic_config, "base")

        remaining_tables = set(inspect(verification_engine).get_table_names())
        assert "app_user" not in remaining_tables
        assert "audit_log" not in remaining_tables
    finally:
        verification_engine.dispose()
