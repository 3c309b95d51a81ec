"""Authentication API router for login, session introspection and logout."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel, Field

from app.audit import AuditStrategyResolver
from app.auth import AuthStrategyResolver, InvalidCredentialsError
from app.domain import AuditEvent, AuthCredentials, AuthUser

from .audit import api_audit_request_context, api_record_audit_event

_bearer_scheme = HTTPBearer(auto_error=False)


class LoginRequest(BaseModel):
    """Request body for local login."""

    email: str
    password: str = Field(repr=False)


def _api_unauthorized(message: str) -> JSONResponse:
    return JSONResponse(
        content={"status": "error", "message": message},
        status_code=status.HTTP_401_UNAUTHORIZED,
        headers={"WWW-Authenticate": "Bearer"},
    )


def api_serialize_auth_user(user: AuthUser) -> dict[str, object]:
    """Serialize an authenticated principal for API responses."""

    return {
        "id": user.user_id,
        "email": user.email,
        "display_name": user.display_name,
        "roles": list(user.roles),
    }


def api_create_auth_router(auth_resolver: AuthStrategyResolver, audit_resolver: AuditStrategyResolver) -> APIRouter:
    """Create authentication router backed by the default auth strategy.

    Args:
        auth_resolver: Resolver providing auth strategies.
        audit_resolver: Resolver providing the active audit strategy.

    Returns:
        APIRouter: Router exposing `/auth` endpoints.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if auth_resolver is None:
        raise ValueError("auth_resolver must not be None")
    if audit_resolver is None:
        raise ValueError("audit_resolver must not be None")

    router = APIRouter(prefix="/auth", tags=["auth"])

    @router.post("/login")
    def api_auth_login(body: LoginRequest, request: Request) -> JSONResponse:
        """Exchange email and password for an access token.

        Returns:
            JSONResponse: Token payload, or 401 for rejected credentials.
        """

        strategy = auth_resolver.get_default()
        request_context = api_audit_request_context(request)
        try:
            user = strategy.authenticate(AuthCredentials(email=body.email, password=body.password))
        except InvalidCredentialsError as error:
            api_record_audit_event(
                audit_resolver,
                AuditEvent(
                    action="auth.login",
                    resource="session",
                    result="failure",
                    error_message=str(error),
                    metadata={"email": body.email, "provider": strategy.name},
                    **request_context,
                ),
            )
            return _api_unauthorized(str(error))

        token = strategy.generate_tokens(user)
        api_record_audit_event(
            audit_resolver,
            AuditEvent(
                action="auth.login",
                resource="session",
                result="success",
                user_id=user.user_id,
                metadata={"provider": strategy.name},
                **request_context,
            ),
        )
        payload = {
            "access_token": token.access_token,
            "token_type": "bearer",
            "expires_in": token.expires_in,
            "user": api_serialize_auth_user(user),
        }
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    @router.get("/me")
    def api_auth_me(
        credentials: HTTPAuthorizationCredentials | None = Depends(_bearer_scheme),
    ) -> JSONResponse:
        """Return the principal carried by the bearer token."""

        if credentials is None:
            return _api_unauthorized("Missing bearer token")
        user = auth_resolver.get_default().validate_token(credentials.credentials)
        if user is None:
            return _api_unauthorized("Invalid or expired token")
        return JSONResponse(content=api_serialize_auth_user(user), status_code=status.HTTP_200_OK)

    @router.post("/logout")
    def api_auth_logout(
        credentials: HTTPAuthorizationCredentials | None = Depends(_bearer_scheme),
    ) -> Response:
        """Revoke the presented bearer token in this process."""

        if credentials is None:
            return _api_unauthorized("Missing bearer token")
        strategy = auth_resolver.get_default()
        if strategy.validate_token(credentials.credentials) is None:
            return _api_unauthorized("Invalid or expired token")
        strategy.revoke_token(credentials.credentials)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
