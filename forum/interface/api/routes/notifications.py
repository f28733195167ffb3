"""Notification routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, Response, status

from forum.application.usecase.notification import (
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    MarkNotificationReadRequest,
    MarkNotificationReadResponse,
    MarkNotificationReadUseCase,
)
from forum.domain.service import JWTService
from forum.interface.api.common import require_user_id

router = APIRouter(prefix="/notifications", tags=["notifications"], route_class=DishkaRoute)


@router.get("", response_model=ListNotificationsResponse)
async def list_notifications(
    list_notifications_use_case: FromDishka[ListNotificationsUseCase],
    jwt_service: FromDishka[JWTService],
    unread_only: bool = False,
    limit: int = Query(default=30, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    auth_token: str | None = Cookie(default=None),
) -> ListNotificationsResponse:
    """List the current user's notifications, most recent first."""
    user_id = require_user_id(jwt_service, auth_token, "read notifications")

    return await list_notifications_use_case.execute(
        ListNotificationsRequest(
            user_id=user_id, unread_only=unread_only, limit=limit, offset=offset
        )
    )


@router.post("/{notification_id}/read", response_model=MarkNotificationReadResponse)
async def mark_notification_read(
    notification_id: str,
    response: Response,
    mark_notification_read_use_case: FromDishka[MarkNotificationReadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> MarkNotificationReadResponse:
    """Mark one of the current user's notifications as read."""
    user_id = require_user_id(jwt_service, auth_token, "read notifications")

    result = await mark_notification_read_use_case.execute(
        MarkNotificationReadRequest(user_id=user_id, notification_id=notification_id)
    )
    if result.forbidden:
        response.status_code = status.HTTP_403_FORBIDDEN
    return result
