"""Database engine and transaction utilities.

This module centralizes database connectivity primitives to enforce the db-layer
boundary for all SQLAlchemy usage.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, TypeVar

from sqlalchemy import Connection, Engine, create_engine
from sqlalchemy.engine import make_url

_T = TypeVar("_T")

_BARE_POSTGRES_DRIVERS = ("postgres", "postgresql")
DATABASE_CONNECT_TIMEOUT_SECONDS = 5


def db_normalize_database_url(database_url: str) -> str:
    """Point bare PostgreSQL URLs at the psycopg driver.

    URLs that already name a driver, or use another backend, are returned
    unchanged.

    Args:
        database_url: Connection string as configured.

    Returns:
        str: SQLAlchemy URL usable by `create_engine`.

    Raises:
        ValueError: Raised when the database URL is blank.
    """

    if not database_url.strip():
        raise ValueError("database_url must not be blank")
    parsed_url = make_url(database_url)
    if parsed_url.drivername not in _BARE_POSTGRES_DRIVERS:
        return database_url
    return parsed_url.set(drivername="postgresql+psycopg").render_as_string(hide_password=False)


def db_create_engine(database_url: str) -> Engine:
    """Create the SQLAlchemy engine for application database access.

    PostgreSQL connections are opened with a bounded connect timeout so a
    stalled server cannot hold readiness checks for the driver default.

    Args:
        database_url: Connection string, normalized to the psycopg driver.

    Returns:
        Engine: Configured SQLAlchemy engine.

    Raises:
        ValueError: Raised when the database URL is blank.
    """

    normalized_url = db_normalize_database_url(database_url)
    connect_args: dict[str, object] = {}
    if make_url(normalized_url).get_backend_name() == "postgresql":
        connect_args["connect_timeout"] = DATABASE_CONNECT_TIMEOUT_SECONDS
    return create_engine(normalized_url, pool_pre_ping=True, connect_args=connect_args)


def db_as_utc(value: datetime) -> datetime:
    """Attach UTC to naive timestamps returned by drivers without timezone support."""

    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SQLAlchemyUnitOfWork:
    """Run handlers atomically inside one database transaction."""

    def __init__(self, engine: Engine):
        if engine is None:
            raise ValueError("engine must not be None")
        self._engine = engine

    def db_execute(self, handler: Callable[[Connection], _T]) -> _T:
        """Execute a handler within a transaction committed on success.

        Args:
            handler: Callable receiving the transactional connection.

        Returns:
            _T: Handler result.

        Raises:
            Exception: Any handler exception, after the transaction is rolled back.
        """

        with self._engine.begin() as connection:
            return handler(connection)
