"""Tests for user domain values and the user application service."""

from datetime import datetime, timezone

import pytest

from app.domain import InvalidUserIdError, User, UserId
from app.users import UserAlreadyExistsError, UserService


class _InMemoryUserRepository:
    """User repository double keyed by identifier."""

    def __init__(self):
        self.users: dict[str, User] = {}

    def db_user_get_by_id(self, user_id: UserId) -> User | None:
        return self.users.get(str(user_id))

    def db_user_get_by_email(self, email: str) -> User | None:
        return next((user for user in self.users.values() if user.email == email), None)

    def db_user_save(self, user: User) -> User:
        self.users[str(user.user_id)] = user
        return user

    def db_user_delete_by_id(self, user_id: UserId) -> None:
        self.users.pop(str(user_id), None)


def test_users_id_generate_produces_valid_identifier() -> None:
    """Generate 36-character identifiers that pass validation."""

    user_id = UserId.generate()

    assert len(str(user_id)) == 36
    assert UserId.is_valid(str(user_id))
    assert UserId.generate() != user_id


@pytest.mark.parametrize("raw_value", ["", "123", "z" * 36, "0f0f0f0f-0f0f-0f0f-0f0f-0f0f0f0f0f0f0"])
def test_users_id_rejects_malformed_values(raw_value: str) -> None:
    """Raise InvalidUserIdError for values outside the identifier format."""

    with pytest.raises(InvalidUserIdError):
        UserId(raw_value)


def test_users_entity_transitions_advance_updated_at() -> None:
    """Produce strictly later timestamps even when the clock lags behind."""

    future = datetime(2999, 1, 1, tzinfo=timezone.utc)
    user = User(
        user_id=UserId.generate(),
        email="ada@example.com",
        display_name="Ada",
        status="invited",
        created_at=future,
        updated_at=future,
    )

    renamed_user = user.with_updated_name("Ada L.")
    activated_user = renamed_user.with_status("active")

    assert renamed_user.display_name == "Ada L."
    assert renamed_user.updated_at > user.updated_at
    assert activated_user.status == "active"
    assert activated_user.updated_at > renamed_user.updated_at
    assert user.display_name == "Ada"


def test_users_create_persists_invited_user() -> None:
    """Create a trimmed, invited user without a password hash.

    Returns:
        None: Assertions validate created user values.

    Raises:
        AssertionError: Raised when created values are unexpected.
    """

    repository = _InMemoryUserRepository()

    user = UserService(repository=repository).user_create(email=" ada@example.com ", display_name=" Ada ")

    assert user.email == "ada@example.com"
    assert user.display_name == "Ada"
    assert user.status == "invited"
    assert user.password_hash is None
    assert user.created_at == user.updated_at
    assert repository.users == {str(user.user_id): user}


def test_users_create_rejects_duplicate_email() -> None:
    """Raise UserAlreadyExistsError when the email is taken."""

    service = UserService(repository=_InMemoryUserRepository())
    service.user_create(email="ada@example.com", display_name="Ada")

    with pytest.raises(UserAlreadyExistsError):
        service.user_create(email="ada@example.com", display_name="Another Ada")


@pytest.mark.parametrize(("email", "display_name"), [("", "Ada"), ("ada@example.com", "   ")])
def test_users_create_rejects_blank_fields(email: str, display_name: str) -> None:
    """Raise ValueError for blank email or display name."""

    with pytest.raises(ValueError):
        UserService(repository=_InMemoryUserRepository()).user_create(email=email, display_name=display_name)


def test_users_get_by_id_returns_user_or_none() -> None:
    """Fetch stored users and return None for unknown identifiers."""

    service = UserService(repository=_InMemoryUserRepository())
    user = service.user_create(email="ada@example.com", display_name="Ada")

    assert service.user_get_by_id(str(user.user_id)) == user
    assert service.user_get_by_id(str(UserId.generate())) is None


def test_users_get_by_id_rejects_malformed_identifier() -> None:
    """Raise InvalidUserIdError before touching the repository."""

    with pytest.raises(InvalidUserIdError):
        UserService(repository=_InMemoryUserRepository()).user_get_by_id("not-a-user-id")
