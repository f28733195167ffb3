"""Reply routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Response, status
from pydantic import BaseModel

from forum.application.usecase.common import ActionResponse
from forum.application.usecase.reply import (
    CreateReplyRequest,
    CreateReplyResponse,
    CreateReplyUseCase,
    UpdateReplyRequest,
    UpdateReplyUseCase,
)
from forum.domain.service import JWTService
from forum.interface.api.common import require_user_id, status_for

router = APIRouter(tags=["replies"], route_class=DishkaRoute)


class ReplyAPIRequest(BaseModel):
    """API request for creating or editing a reply."""

    body: str


@router.post("/threads/{slug}/replies", response_model=CreateReplyResponse)
async def create_reply(
    slug: str,
    request: ReplyAPIRequest,
    response: Response,
    create_reply_use_case: FromDishka[CreateReplyUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateReplyResponse:
    """Reply to a thread.

    Requires authentication.
    """
    user_id = require_user_id(jwt_service, auth_token, "reply")

    result = await create_reply_use_case.execute(
        CreateReplyRequest(user_id=user_id, slug=slug, body=request.body)
    )
    response.status_code = status_for(result, status.HTTP_201_CREATED)
    return result


@router.put("/replies/{reply_id}", response_model=ActionResponse)
async def update_reply(
    reply_id: str,
    request: ReplyAPIRequest,
    response: Response,
    update_reply_use_case: FromDishka[UpdateReplyUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ActionResponse:
    """Edit a reply as its author or a moderator."""
    user_id = require_user_id(jwt_service, auth_token, "edit replies")

    result = await update_reply_use_case.execute(
        UpdateReplyRequest(user_id=user_id, reply_id=reply_id, body=request.body)
    )
    response.status_code = status_for(result)
    return result
