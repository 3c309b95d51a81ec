"""User API router composition for create and fetch endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.audit import AuditStrategyResolver
from app.domain import AuditEvent, InvalidUserIdError, User
from app.users import UserAlreadyExistsError, UserService

from .audit import api_audit_request_context, api_record_audit_event


class UserCreateRequest(BaseModel):
    """Request body for user creation."""

    email: str
    display_name: str


def api_create_users_router(user_service: UserService, audit_resolver: AuditStrategyResolver) -> APIRouter:
    """Create users router.

    Args:
        user_service: User application service.
        audit_resolver: Resolver providing the active audit strategy.

    Returns:
        APIRouter: Router exposing `/users` endpoints.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if user_service is None:
        raise ValueError("user_service must not be None")
    if audit_resolver is None:
        raise ValueError("audit_resolver must not be None")

    router = APIRouter(prefix="/users", tags=["users"])

    @router.post("")
    def api_user_create(body: UserCreateRequest, request: Request) -> JSONResponse:
        """Create an invited user.

        Returns:
            JSONResponse: Created user (201), 400 for blank fields, 409 for duplicate email.
        """

        request_context = api_audit_request_context(request)
        try:
            user = user_service.user_create(email=body.email, display_name=body.display_name)
        except UserAlreadyExistsError as error:
            api_record_audit_event(
                audit_resolver,
                AuditEvent(
                    action="user.create",
                    resource="user",
                    result="failure",
                    error_message=str(error),
                    metadata={"email": body.email},
                    **request_context,
                ),
            )
            payload = {"status": "error", "message": str(error)}
            return JSONResponse(content=payload, status_code=status.HTTP_409_CONFLICT)
        except ValueError as error:
            payload = {"status": "error", "message": str(error)}
            return JSONResponse(content=payload, status_code=status.HTTP_400_BAD_REQUEST)

        api_record_audit_event(
            audit_resolver,
            AuditEvent(
                action="user.create",
                resource="user",
                result="success",
                resource_id=str(user.user_id),
                **request_context,
            ),
        )
        return JSONResponse(content=api_serialize_user(user), status_code=status.HTTP_201_CREATED)

    @router.get("/{user_id}")
    def api_user_detail(user_id: str) -> JSONResponse:
        """Return one user by identifier.

        Returns:
            JSONResponse: User payload, 400 for malformed id, 404 when missing.
        """

        try:
            user = user_service.user_get_by_id(user_id)
        except InvalidUserIdError as error:
            payload = {"status": "error", "message": str(error)}
            return JSONResponse(content=payload, status_code=status.HTTP_400_BAD_REQUEST)
        if user is None:
            payload = {"status": "error", "message": "User not found"}
            return JSONResponse(content=payload, status_code=status.HTTP_404_NOT_FOUND)
        return JSONResponse(content=api_serialize_user(user), status_code=status.HTTP_200_OK)

    return router


def api_serialize_user(user: User) -> dict[str, object]:
    """Serialize one user for API responses; the password hash is never exposed."""

    return {
        "id": str(user.user_id),
        "email": user.email,
        "display_name": user.display_name,
        "status": user.status,
        "created_at": user.created_at.isoformat(),
        "updated_at": user.updated_at.isoformat(),
    }
