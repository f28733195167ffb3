"""Like routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie

from forum.application.usecase.like import (
    ToggleLikeRequest,
    ToggleLikeResponse,
    ToggleLikeUseCase,
)
from forum.domain.service import JWTService
from forum.domain.value import LikeableType

router = APIRouter(tags=["likes"], route_class=DishkaRoute)


@router.post("/threads/{thread_id}/like", response_model=ToggleLikeResponse)
async def toggle_thread_like(
    thread_id: str,
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ToggleLikeResponse:
    """Like or unlike a thread.

    Logged-out visitors get the current state back without any change.
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    return await toggle_like_use_case.execute(
        ToggleLikeRequest(
            likeable_type=LikeableType.THREAD,
            likeable_id=thread_id,
            user_id=user_id,
        )
    )


@router.post("/replies/{reply_id}/like", response_model=ToggleLikeResponse)
async def toggle_reply_like(
    reply_id: str,
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ToggleLikeResponse:
    """Like or unlike a reply."""
    user_id = jwt_service.get_user_id_from_token(auth_token)
    return await toggle_like_use_case.execute(
        ToggleLikeRequest(
            likeable_type=LikeableType.REPLY,
            likeable_id=reply_id,
            user_id=user_id,
        )
    )
