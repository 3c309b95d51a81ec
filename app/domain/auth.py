"""Authentication value types exchanged with auth strategies."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

AuthProvider = Literal["local", "oauth", "saml", "jwt"]


@dataclass(frozen=True)
class AuthCredentials:
    """Email and plaintext password presented at login."""

    email: str
    password: str = field(repr=False)


@dataclass(frozen=True)
class AuthToken:
    """Issued token bundle.

    Attributes:
        access_token: Signed access token.
        expires_in: Access token lifetime in seconds.
        refresh_token: Optional refresh token.
    """

    access_token: str = field(repr=False)
    expires_in: int
    refresh_token: str | None = field(default=None, repr=False)


@dataclass(frozen=True)
class AuthUser:
    """Authenticated principal carried in tokens."""

    user_id: str
    email: str
    display_name: str
    roles: tuple[str, ...]
