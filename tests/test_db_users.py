"""Tests for SQLAlchemy user persistence and transaction utilities."""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import Engine, create_engine, func, insert, select
from sqlalchemy.pool import StaticPool

from app.db import SQLAlchemyUnitOfWork, SQLAlchemyUserRepository, app_user_table, metadata
from app.domain import User, UserId


def _build_engine() -> Engine:
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    metadata.create_all(engine)
    return engine


def _build_user(email: str = "ada@example.com") -> User:
    created_at = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)
    return User(
        user_id=UserId.generate(),
        email=email,
        display_name="Ada",
        status="invited",
        created_at=created_at,
        updated_at=created_at,
    )


def test_db_user_save_inserts_and_reads_back() -> None:
    """Insert a new user and fetch it by identifier and email.

    Returns:
        None: Assertions validate persistence round trip.

    Raises:
        AssertionError: Raised when stored values differ.
    """

    repository = SQLAlchemyUserRepository(engine=_build_engine())
    user = _build_user()

    stored_user = repository.db_user_save(user)

    assert stored_user == user
    assert repository.db_user_get_by_id(user.user_id) == user
    assert repository.db_user_get_by_email("ada@example.com") == user
    assert stored_user.created_at.tzinfo is not None


def test_db_user_save_updates_existing_identifier() -> None:
    """Update mutable fields when the identifier already exists."""

    repository = SQLAlchemyUserRepository(engine=_build_engine())
    user = repository.db_user_save(_build_user())

    renamed_user = repository.db_user_save(user.with_updated_name("Ada Lovelace").with_status("active"))

    assert renamed_user.display_name == "Ada Lovelace"
    assert renamed_user.status == "active"
    assert renamed_user.created_at == user.created_at
    assert renamed_user.updated_at > user.updated_at
    assert repository.db_user_get_by_id(user.user_id) == renamed_user


def test_db_user_lookups_return_none_for_missing_rows() -> None:
    """Return None for unknown identifiers and emails."""

    repository = SQLAlchemyUserRepository(engine=_build_engine())

    assert repository.db_user_get_by_id(UserId.generate()) is None
    assert repository.db_user_get_by_email("missing@example.com") is None


def test_db_user_delete_removes_row() -> None:
    """Delete one user by identifier."""

    repository = SQLAlchemyUserRepository(engine=_build_engine())
    user = repository.db_user_save(_build_user())

    repository.db_user_delete_by_id(user.user_id)

    assert repository.db_user_get_by_id(user.user_id) is None


def test_db_user_save_wraps_unique_email_violation() -> None:
    """Raise RuntimeError when a second user reuses an email."""

    repository = SQLAlchemyUserRepository(engine=_build_engine())
    repository.db_user_save(_build_user())

    with pytest.raises(RuntimeError, match="failed to save user"):
        repository.db_user_save(_build_user())


def test_db_user_repository_rejects_missing_engine() -> None:
    """Raise ValueError when engine is None."""

    with pytest.raises(ValueError):
        SQLAlchemyUserRepository(engine=None)  # type: ignore[arg-type]


def test_db_unit_of_work_commits_handler_result() -> None:
    """Commit writes and return the handler result."""

    engine = _build_engine()
    now = datetime.now(timezone.utc)

    def _insert_user(connection) -> str:
        user_id = str(UserId.generate())
        connection.execute(
            insert(app_user_table).values(
                id=user_id,
                email="grace@example.com",
                display_name="Grace",
                status="active",
                created_at=now,
                updated_at=now,
            )
        )
        return user_id

    user_id = SQLAlchemyUnitOfWork(engine).db_execute(_insert_user)

    stored_user = SQLAlchemyUserRepository(engine=engine).db_user_get_by_id(UserId(user_id))
    assert stored_user is not None
    assert stored_user.email == "grace@example.com"


def test_db_unit_of_work_rolls_back_on_error() -> None:
    """Discard writes when the handler raises."""

    engine = _build_engine()
    now = datetime.now(timezone.utc) - timedelta(minutes=1)

    def _insert_then_fail(connection) -> None:
        connection.execute(
            insert(app_user_table).values(
                id=str(UserId.generate()),
                email="rollback@example.com",
                display_name="Rollback",
                status="invited",
                created_at=now,
                updated_at=now,
            )
        )
        raise RuntimeError("handler failed")

    with pytest.raises(RuntimeError, match="handler failed"):
        SQLAlchemyUnitOfWork(engine).db_execute(_insert_then_fail)

    with engine.connect() as connection:
        assert connection.execute(select(func.count()).select_from(app_user_table)).scalar_one() == 0
