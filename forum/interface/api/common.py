"""Helpers shared by the API routes."""

from fastapi import status

from forum.application.usecase.common import ActionResponse
from forum.domain.service import JWTService
from forum.interface.error import AuthenticationRequiredError


def require_user_id(jwt_service: JWTService, auth_token: str | None, action: str) -> str:
    """Return the authenticated user's ID.

    Raises:
        AuthenticationRequiredError: If the token is missing or invalid
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise AuthenticationRequiredError(f"Authentication required to {action}")
    return user_id


def status_for(result: ActionResponse, success_status: int = status.HTTP_200_OK) -> int:
    """Map an action outcome to an HTTP status code."""
    if result.success:
        return success_status
    if result.forbidden:
        return status.HTTP_403_FORBIDDEN
    if getattr(result, "rate_limited", False):
        return status.HTTP_429_TOO_MANY_REQUESTS
    return status.HTTP_422_UNPROCESSABLE_ENTITY
