"""Mark notification read use case."""

from datetime import datetime

from pydantic import BaseModel

from forum.application.usecase.common import FORBIDDEN, parse_id
from forum.domain.error import ForbiddenError
from forum.domain.service import NotificationService, UserService
from forum.domain.value import NotificationId, UserId


class MarkNotificationReadRequest(BaseModel):
    """Mark notification read request."""

    user_id: str
    notification_id: str


class MarkNotificationReadResponse(BaseModel):
    """Mark notification read response."""

    success: bool
    forbidden: bool = False
    message: str | None = None
    read_at: datetime | None = None


class MarkNotificationReadUseCase:
    """Use case for marking one of the user's notifications as read."""

    def __init__(
        self, notification_service: NotificationService, user_service: UserService
    ) -> None:
        """Initialize mark notification read use case.

        Args:
            notification_service: Notification domain service
            user_service: User domain service
        """
        self.notification_service = notification_service
        self.user_service = user_service

    async def execute(
        self, request: MarkNotificationReadRequest
    ) -> MarkNotificationReadResponse:
        """Execute mark notification read flow.

        Raises:
            NotFoundError: If the user or notification does not exist
        """
        user = await self.user_service.get_by_id(
            UserId(parse_id(request.user_id, "User"))
        )

        try:
            notification = await self.notification_service.mark_as_read(
                user, NotificationId(parse_id(request.notification_id, "Notification"))
            )
        except ForbiddenError:
            return MarkNotificationReadResponse(
                success=False, forbidden=True, message=FORBIDDEN
            )

        return MarkNotificationReadResponse(success=True, read_at=notification.read_at)
