"""API router package for endpoint composition."""

from .auth import api_create_auth_router
from .health import api_create_health_router
from .users import api_create_users_router

__all__ = ["api_create_auth_router", "api_create_health_router", "api_create_users_router"]
