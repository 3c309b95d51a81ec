"""Database health service implementations for connectivity and schema checks."""

from __future__ import annotations

from pathlib import Path

from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from sqlalchemy import Engine, text
from sqlalchemy.exc import SQLAlchemyError

from app.domain import DatabaseReadiness

DEFAULT_MIGRATIONS_DIRECTORY = Path(__file__).resolve().parents[2] / "alembic"


class SQLAlchemyDatabaseHealthService:
    """Database health service backed by SQLAlchemy connectivity and Alembic revision checks."""

    def __init__(self, engine: Engine, migrations_directory: Path = DEFAULT_MIGRATIONS_DIRECTORY):
        """Initialize database health service.

        Args:
            engine: SQLAlchemy engine used for connectivity checks.
            migrations_directory: Alembic script location holding migration revisions.

        Raises:
            ValueError: Raised when engine is None.
        """

        if engine is None:
            raise ValueError("engine must not be None")
        self._engine = engine
        self._migrations_directory = migrations_directory

    def db_check_readiness(self) -> DatabaseReadiness:
        """Verify connectivity and compare applied migrations with migration heads.

        Returns:
            DatabaseReadiness: Schema status with diagnostic detail.

        Raises:
            ConnectionError: Raised when connectivity check fails.
        """

        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
                current_heads = set(MigrationContext.configure(connection).get_current_heads())
        except SQLAlchemyError as error:
            raise ConnectionError("database connectivity check failed") from error

        expected_heads = set(self._db_migration_script_directory().get_heads())
        if current_heads == expected_heads:
            return DatabaseReadiness(schema_up_to_date=True, detail="database schema is up to date")
        return DatabaseReadiness(
            schema_up_to_date=False,
            detail=(
                f"database schema is behind: applied {sorted(current_heads) or ['none']}, "
                f"expected {sorted(expected_heads)}"
            ),
        )

    def _db_migration_script_directory(self) -> ScriptDirectory:
        alembic_config = Config()
        alembic_config.set_main_option("script_location", str(self._migrations_directory))
        return ScriptDirectory.from_config(alembic_config)
