"""User application layer."""

from .service import UserAlreadyExistsError, UserService

__all__ = ["UserAlreadyExistsError", "UserService"]
