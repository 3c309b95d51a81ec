"""Local email/password authentication with bcrypt hashes and HS256 JWTs."""

from __future__ import annotations

import hmac
from datetime import datetime, timedelta, timezone

import bcrypt
import jwt

from app.config import SecurityConfig
from app.db import UserRepositoryPort
from app.domain import AuthCredentials, AuthToken, AuthUser, User, UserId

from .interfaces import AuthStrategyPort, InvalidCredentialsError

SALT_ROUNDS = 10
BCRYPT_MAX_PASSWORD_BYTES = 72
TOKEN_EXPIRY_SECONDS = 3600
JWT_ALGORITHM = "HS256"
ADMIN_ROLES = ("admin", "user")
USER_ROLES = ("user",)


class LocalAuthStrategy(AuthStrategyPort):
    """Authenticate users stored in the local user repository.

    Revoked tokens are held in process memory only: revocations are lost on
    restart and are not shared between instances.
    """

    name = "local"

    def __init__(
        self,
        security: SecurityConfig,
        user_repository: UserRepositoryPort,
        admin_bootstrap_password: str | None = None,
        salt_rounds: int = SALT_ROUNDS,
    ):
        """Initialize local auth strategy.

        Args:
            security: Security section providing the JWT signing secret and
                the admin email.
            user_repository: Repository used to look up and create users.
            admin_bootstrap_password: When set, the first login with the admin
                email and this password creates the admin user.
            salt_rounds: bcrypt cost factor for new hashes.

        Raises:
            ValueError: Raised when a required collaborator is None or the
                bootstrap password exceeds the bcrypt input limit.
        """

        if security is None:
            raise ValueError("security must not be None")
        if user_repository is None:
            raise ValueError("user_repository must not be None")
        if (
            admin_bootstrap_password is not None
            and len(admin_bootstrap_password.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES
        ):
            raise ValueError(f"admin_bootstrap_password must not exceed {BCRYPT_MAX_PASSWORD_BYTES} bytes")
        self._security = security
        self._user_repository = user_repository
        self._admin_email = security.admin_email
        self._admin_bootstrap_password = admin_bootstrap_password
        self._salt_rounds = salt_rounds
        self._revoked_tokens: set[str] = set()

    def authenticate(self, credentials: AuthCredentials) -> AuthUser:
        """Verify email and password against the stored bcrypt hash.

        Args:
            credentials: Presented email and password.

        Returns:
            AuthUser: Authenticated principal with roles.

        Raises:
            InvalidCredentialsError: Raised for unknown, disabled or
                passwordless users and for wrong passwords.
        """

        if self._auth_is_admin_bootstrap_attempt(credentials):
            return self._auth_to_principal(self._auth_ensure_admin_user())

        user = self._user_repository.db_user_get_by_email(credentials.email)
        if user is None or not user.password_hash or user.status == "disabled":
            raise InvalidCredentialsError("Invalid credentials")
        if not self.compare_password(credentials.password, user.password_hash):
            raise InvalidCredentialsError("Invalid credentials")
        return self._auth_to_principal(user)

    def validate_token(self, token: str) -> AuthUser | None:
        """Decode a token, returning None when revoked, expired or malformed."""

        if self.is_token_revoked(token):
            return None
        try:
            claims = jwt.decode(
                token,
                self._security.jwt_secret,
                algorithms=[JWT_ALGORITHM],
                options={"require": ["exp", "sub"]},
            )
        except jwt.InvalidTokenError:
            return None
        return AuthUser(
            user_id=str(claims["sub"]),
            email=str(claims.get("email", "")),
            display_name=str(claims.get("display_name", "")),
            roles=tuple(claims.get("roles", ())),
        )

    def generate_tokens(self, user: AuthUser) -> AuthToken:
        """Issue a signed access token valid for `TOKEN_EXPIRY_SECONDS`."""

        issued_at = datetime.now(timezone.utc)
        claims = {
            "sub": user.user_id,
            "email": user.email,
            "display_name": user.display_name,
            "roles": list(user.roles),
            "iat": issued_at,
            "exp": issued_at + timedelta(seconds=TOKEN_EXPIRY_SECONDS),
        }
        access_token = jwt.encode(claims, self._security.jwt_secret, algorithm=JWT_ALGORITHM)
        return AuthToken(access_token=access_token, expires_in=TOKEN_EXPIRY_SECONDS)

    def revoke_token(self, token: str) -> None:
        self._revoked_tokens.add(token)

    def is_token_revoked(self, token: str) -> bool:
        return token in self._revoked_tokens

    def hash_password(self, password: str) -> str:
        """Hash a password with bcrypt.

        Raises:
            ValueError: Raised when the password exceeds bcrypt's 72-byte input limit.
        """

        encoded_password = password.encode("utf-8")
        if len(encoded_password) > BCRYPT_MAX_PASSWORD_BYTES:
            raise ValueError(f"password must not exceed {BCRYPT_MAX_PASSWORD_BYTES} bytes")
        return bcrypt.hashpw(encoded_password, bcrypt.gensalt(rounds=self._salt_rounds)).decode("utf-8")

    def compare_password(self, password: str, password_hash: str) -> bool:
        """Return True when the password matches; over-long passwords never match."""

        encoded_password = password.encode("utf-8")
        if len(encoded_password) > BCRYPT_MAX_PASSWORD_BYTES:
            return False
        return bcrypt.checkpw(encoded_password, password_hash.encode("utf-8"))

    def _auth_is_admin_bootstrap_attempt(self, credentials: AuthCredentials) -> bool:
        if self._admin_bootstrap_password is None or credentials.email != self._admin_email:
            return False
        if self._user_repository.db_user_get_by_email(self._admin_email) is not None:
            return False
        return hmac.compare_digest(
            credentials.password.encode("utf-8"), self._admin_bootstrap_password.encode("utf-8")
        )

    def _auth_ensure_admin_user(self) -> User:
        existing_admin = self._user_repository.db_user_get_by_email(self._admin_email)
        if existing_admin is not None:
            return existing_admin

        now = datetime.now(timezone.utc)
        admin_user = User(
            user_id=UserId.generate(),
            email=self._admin_email,
            display_name="Admin User",
            password_hash=self.hash_password(self._admin_bootstrap_password or ""),
            status="active",
            created_at=now,
            updated_at=now,
        )
        return self._user_repository.db_user_save(admin_user)

    def _auth_to_principal(self, user: User) -> AuthUser:
        return AuthUser(
            user_id=str(user.user_id),
            email=user.email,
            display_name=user.display_name,
            roles=ADMIN_ROLES if user.email == self._admin_email else USER_ROLES,
        )
