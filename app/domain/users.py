"""User entity and identifier value object."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta, timezone
from typing import Literal
from uuid import uuid4

UserStatus = Literal["active", "invited", "disabled"]

_USER_ID_PATTERN = re.compile(r"^[0-9a-fA-F-]{36}$")


class InvalidUserIdError(ValueError):
    """Raised when a user identifier does not match the identifier format."""


@dataclass(frozen=True)
class UserId:
    """Validated 36-character user identifier."""

    value: str

    def __post_init__(self) -> None:
        if not UserId.is_valid(self.value):
            raise InvalidUserIdError("Invalid user id")

    @staticmethod
    def is_valid(value: str) -> bool:
        return bool(_USER_ID_PATTERN.fullmatch(value))

    @classmethod
    def generate(cls) -> UserId:
        return cls(str(uuid4()))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class User:
    """Immutable user entity.

    Attributes:
        user_id: Validated identifier.
        email: Unique login email.
        display_name: Name shown to other users.
        status: Lifecycle status.
        created_at: Creation timestamp (UTC).
        updated_at: Last modification timestamp (UTC).
        password_hash: bcrypt hash, absent for invited users.
    """

    user_id: UserId
    email: str
    display_name: str
    status: UserStatus
    created_at: datetime
    updated_at: datetime
    password_hash: str | None = field(default=None, repr=False)

    def with_updated_name(self, display_name: str) -> User:
        return replace(self, display_name=display_name, updated_at=_user_next_timestamp(self.updated_at))

    def with_status(self, status: UserStatus) -> User:
        return replace(self, status=status, updated_at=_user_next_timestamp(self.updated_at))


def _user_next_timestamp(previous: datetime) -> datetime:
    # Strictly later than `previous` even when the clock has not advanced.
    now = datetime.now(timezone.utc)
    if previous.tzinfo is None:
        previous = previous.replace(tzinfo=timezone.utc)
    return now if now > previous else previous + timedelta(milliseconds=1)
