"""User application service for create and fetch use cases."""

from __future__ import annotations

from datetime import datetime, timezone

from app.db import UserRepositoryPort
from app.domain import User, UserId


class UserAlreadyExistsError(ValueError):
    """Raised when a user with the requested email already exists."""


class UserService:
    """Create and fetch users through the user repository port."""

    def __init__(self, repository: UserRepositoryPort):
        if repository is None:
            raise ValueError("repository must not be None")
        self._repository = repository

    def user_create(self, email: str, display_name: str) -> User:
        """Create an invited user.

        Args:
            email: Unique login email.
            display_name: Name shown to other users.

        Returns:
            User: Persisted user.

        Raises:
            UserAlreadyExistsError: Raised when the email is already taken.
            ValueError: Raised when email or display name is blank.
        """

        normalized_email = email.strip()
        normalized_display_name = display_name.strip()
        if not normalized_email:
            raise ValueError("email must not be blank")
        if not normalized_display_name:
            raise ValueError("display_name must not be blank")

        if self._repository.db_user_get_by_email(normalized_email) is not None:
            raise UserAlreadyExistsError("User with this email already exists")

        now = datetime.now(timezone.utc)
        user = User(
            user_id=UserId.generate(),
            email=normalized_email,
            display_name=normalized_display_name,
            status="invited",
            created_at=now,
            updated_at=now,
        )
        return self._repository.db_user_save(user)

    def user_get_by_id(self, user_id: str) -> User | None:
        """Fetch one user by raw identifier.

        Args:
            user_id: Raw identifier text.

        Returns:
            User | None: Stored user or None when missing.

        Raises:
            InvalidUserIdError: Raised when the identifier format is invalid.
        """

        return self._repository.db_user_get_by_id(UserId(user_id))
