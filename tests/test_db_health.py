"""Tests for datastore readiness checks and engine URL handling."""

from pathlib import Path

import pytest
from alembic.script import ScriptDirectory
from alembic.config import Config
from sqlalchemy import Engine, create_engine, text
from sqlalchemy.pool import StaticPool

from app.db import SQLAlchemyDatabaseHealthService, db_create_engine, db_normalize_database_url
from app.db import session as db_session

_MIGRATIONS_DIRECTORY = Path(__file__).resolve().parents[1] / "alembic"


def _build_engine() -> Engine:
    return create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


def _migration_head_revision() -> str:
    alembic_config = Config()
    alembic_config.set_main_option("script_location", str(_MIGRATIONS_DIRECTORY))
    return ScriptDirectory.from_config(alembic_config).get_current_head() or ""


def test_db_check_readiness_reports_unmigrated_database() -> None:
    """Report a behind schema when no revision has been applied."""

    readiness = SQLAlchemyDatabaseHealthService(engine=_build_engine()).db_check_readiness()

    assert readiness.schema_up_to_date is False
    assert "behind" in readiness.detail


def test_db_check_readiness_reports_current_schema() -> None:
    """Report an up-to-date schema when the applied revision is the head.

    Returns:
        None: Assertions validate readiness status.

    Raises:
        AssertionError: Raised when revision comparison is wrong.
    """

    engine = _build_engine()
    with engine.begin() as connection:
        connection.execute(text("CREATE TABLE alembic_version (version_num VARCHAR(32) NOT NULL PRIMARY KEY)"))
        connection.execute(
            text("INSERT INTO alembic_version (version_num) VALUES (:revision)"),
            {"revision": _migration_head_revision()},
        )

    readiness = SQLAlchemyDatabaseHealthService(engine=engine).db_check_readiness()

    assert readiness.schema_up_to_date is True


def test_db_check_readiness_wraps_connection_failure(tmp_path: Path) -> None:
    """Raise ConnectionError when the datastore cannot be opened."""

    engine = create_engine(f"sqlite+pysqlite:///{tmp_path / 'missing' / 'app.db'}")

    with pytest.raises(ConnectionError, match="database connectivity check failed"):
        SQLAlchemyDatabaseHealthService(engine=engine).db_check_readiness()


@pytest.mark.parametrize(
    ("database_url", "expected_url"),
    [
        ("postgres://u:p@h:5432/d", "postgresql+psycopg://u:p@h:5432/d"),
        ("postgresql://u:p@h:5432/d", "postgresql+psycopg://u:p@h:5432/d"),
        ("postgresql+psycopg://u:p@h:5432/d", "postgresql+psycopg://u:p@h:5432/d"),
        ("sqlite+pysqlite:///:memory:", "sqlite+pysqlite:///:memory:"),
        ("sqlite:///:memory:", "sqlite:///:memory:"),
    ],
)
def test_db_normalize_database_url_points_bare_postgres_at_psycopg(database_url: str, expected_url: str) -> None:
    """Rewrite bare PostgreSQL schemes and keep explicit drivers."""

    assert db_normalize_database_url(database_url) == expected_url


def test_db_normalize_database_url_rejects_blank_value() -> None:
    """Raise ValueError for a blank URL."""

    with pytest.raises(ValueError):
        db_normalize_database_url("  ")


def test_db_create_engine_bounds_postgres_connect_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    """Pass a connect timeout to PostgreSQL engines only."""

    engine_calls: list[tuple[str, dict[str, object]]] = []

    def _record_create_engine(url: str, **kwargs: object) -> str:
        engine_calls.append((url, kwargs))
        return url

    monkeypatch.setattr(db_session, "create_engine", _record_create_engine)

    db_create_engine("postgres://u:p@h:5432/d")
    db_create_engine("sqlite+pysqlite:///:memory:")

    assert engine_calls[0] == (
        "postgresql+psycopg://u:p@h:5432/d",
        {"pool_pre_ping": True, "connect_args": {"connect_timeout": db_session.DATABASE_CONNECT_TIMEOUT_SECONDS}},
    )
    assert engine_calls[1] == ("sqlite+pysqlite:///:memory:", {"pool_pre_ping": True, "connect_args": {}})
