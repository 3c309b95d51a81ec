"""Database service for user persistence."""

from __future__ import annotations

from typing import Any

from sqlalchemy import Engine, delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError

from app.domain import User, UserId

from .interfaces import UserRepositoryPort
from .session import db_as_utc
from .tables import app_user_table


class SQLAlchemyUserRepository(UserRepositoryPort):
    """SQLAlchemy-backed user repository."""

    def __init__(self, engine: Engine):
        """Initialize user repository.

        Args:
            engine: SQLAlchemy engine used for all persistence operations.

        Raises:
            ValueError: Raised when engine is None.
        """

        if engine is None:
            raise ValueError("engine must not be None")
        self._engine = engine

    def db_user_get_by_id(self, user_id: UserId) -> User | None:
        """Fetch one user by identifier.

        Args:
            user_id: User identifier.

        Returns:
            User | None: Stored user or None when missing.

        Raises:
            RuntimeError: Raised when the lookup fails.
        """

        try:
            with self._engine.connect() as connection:
                row = connection.execute(
                    select(app_user_table).where(app_user_table.c.id == str(user_id))
                ).mappings().first()
        except SQLAlchemyError as error:
            raise RuntimeError("failed to fetch user by id") from error
        return None if row is None else self._db_map_user(row)

    def db_user_get_by_email(self, email: str) -> User | None:
        """Fetch one user by email.

        Args:
            email: Login email.

        Returns:
            User | None: Stored user or None when missing.

        Raises:
            RuntimeError: Raised when the lookup fails.
        """

        try:
            with self._engine.connect() as connection:
                row = connection.execute(
                    select(app_user_table).where(app_user_table.c.email == email)
                ).mappings().first()
        except SQLAlchemyError as error:
            raise RuntimeError("failed to fetch user by email") from error
        return None if row is None else self._db_map_user(row)

    def db_user_save(self, user: User) -> User:
        """Insert the user, or update it when the identifier already exists.

        Args:
            user: User entity to persist.

        Returns:
            User: Stored user as read back from the database.

        Raises:
            RuntimeError: Raised when persistence fails.
        """

        values = {
            "email": user.email,
            "display_name": user.display_name,
            "password_hash": user.password_hash,
            "status": user.status,
            "updated_at": user.updated_at,
        }
        try:
            with self._engine.begin() as connection:
                existing_id = connection.execute(
                    select(app_user_table.c.id).where(app_user_table.c.id == str(user.user_id))
                ).scalar_one_or_none()
                if existing_id is None:
                    connection.execute(
                        insert(app_user_table).values(id=str(user.user_id), created_at=user.created_at, **values)
                    )
                else:
                    connection.execute(
                        update(app_user_table).where(app_user_table.c.id == str(user.user_id)).values(**values)
                    )
                row = connection.execute(
                    select(app_user_table).where(app_user_table.c.id == str(user.user_id))
                ).mappings().one()
        except SQLAlchemyError as error:
            raise RuntimeError("failed to save user") from error
        return self._db_map_user(row)

    def db_user_delete_by_id(self, user_id: UserId) -> None:
        """Delete one user by identifier.

        Args:
            user_id: User identifier.

        Raises:
            RuntimeError: Raised when deletion fails.
        """

        try:
            with self._engine.begin() as connection:
                connection.execute(delete(app_user_table).where(app_user_table.c.id == str(user_id)))
        except SQLAlchemyError as error:
            raise RuntimeError("failed to delete user") from error

    @staticmethod
    def _db_map_user(row: Any) -> User:
        return User(
            user_id=UserId(row["id"]),
            email=row["email"],
            display_name=row["display_name"],
            password_hash=row["password_hash"],
            status=row["status"],
            created_at=db_as_utc(row["created_at"]),
            updated_at=db_as_utc(row["updated_at"]),
        )
