"""Typed interfaces and errors for authentication strategies."""

from __future__ import annotations

from typing import Protocol

from app.domain import AuthCredentials, AuthToken, AuthUser


class InvalidCredentialsError(PermissionError):
    """Raised when presented credentials do not identify an active user."""


class AuthStrategyPort(Protocol):
    """Port definition for pluggable authentication strategies."""

    name: str

    def authenticate(self, credentials: AuthCredentials) -> AuthUser:
        """Return the authenticated principal.

        Raises:
            InvalidCredentialsError: Raised when credentials are rejected.
        """

    def validate_token(self, token: str) -> AuthUser | None:
        """Return the principal for a valid token, or None."""

    def generate_tokens(self, user: AuthUser) -> AuthToken:
        """Issue tokens for an authenticated principal."""

    def revoke_token(self, token: str) -> None:
        """Invalidate a previously issued token."""
