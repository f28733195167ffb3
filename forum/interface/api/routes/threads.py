"""Thread routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Response, status
from pydantic import BaseModel

from forum.application.usecase.common import ActionResponse
from forum.application.usecase.thread import (
    CreateThreadRequest,
    CreateThreadResponse,
    CreateThreadUseCase,
    DeleteThreadRequest,
    DeleteThreadUseCase,
    GetThreadRequest,
    GetThreadResponse,
    GetThreadUseCase,
    MarkSolutionRequest,
    MarkSolutionUseCase,
    UnmarkSolutionRequest,
    UnmarkSolutionUseCase,
    UpdateThreadRequest,
    UpdateThreadUseCase,
)
from forum.domain.service import JWTService
from forum.interface.api.common import require_user_id, status_for

router = APIRouter(prefix="/threads", tags=["threads"], route_class=DishkaRoute)


class ThreadAPIRequest(BaseModel):
    """API request for creating or editing a thread.

    Length and URL rules are checked by the domain so every field error
    comes back at once.
    """

    subject: str
    body: str
    tags: list[str] = []  # Tag UUIDs


class MarkSolutionAPIRequest(BaseModel):
    """API request for marking a reply as the solution."""

    reply_id: str


@router.get("/{slug}", response_model=GetThreadResponse)
async def get_thread(
    slug: str,
    get_thread_use_case: FromDishka[GetThreadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetThreadResponse:
    """Get a thread with its replies.

    Authentication is optional; it adds the viewer's like state.
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    return await get_thread_use_case.execute(
        GetThreadRequest(slug=slug, user_id=user_id)
    )


@router.post("", response_model=CreateThreadResponse)
async def create_thread(
    request: ThreadAPIRequest,
    response: Response,
    create_thread_use_case: FromDishka[CreateThreadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateThreadResponse:
    """Create a new thread.

    Requires authentication.

    Returns:
        201 with the thread location, 422 with field errors, or 429 when
        the daily thread limit is reached
    """
    user_id = require_user_id(jwt_service, auth_token, "create threads")

    result = await create_thread_use_case.execute(
        CreateThreadRequest(
            user_id=user_id,
            subject=request.subject,
            body=request.body,
            tag_ids=request.tags,
        )
    )
    response.status_code = status_for(result, status.HTTP_201_CREATED)
    return result


@router.put("/{slug}", response_model=ActionResponse)
async def update_thread(
    slug: str,
    request: ThreadAPIRequest,
    response: Response,
    update_thread_use_case: FromDishka[UpdateThreadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ActionResponse:
    """Edit a thread as its author or a moderator."""
    user_id = require_user_id(jwt_service, auth_token, "edit threads")

    result = await update_thread_use_case.execute(
        UpdateThreadRequest(
            user_id=user_id,
            slug=slug,
            subject=request.subject,
            body=request.body,
            tag_ids=request.tags,
        )
    )
    response.status_code = status_for(result)
    return result


@router.delete("/{slug}", response_model=ActionResponse)
async def delete_thread(
    slug: str,
    response: Response,
    delete_thread_use_case: FromDishka[DeleteThreadUseCase],
    jwt_service: FromDishka[JWTService],
    reason: str | None = None,
    auth_token: str | None = Cookie(default=None),
) -> ActionResponse:
    """Delete a thread as its author or a moderator.

    Args:
        reason: Optional explanation sent to the author on moderator deletes
    """
    user_id = require_user_id(jwt_service, auth_token, "delete threads")

    result = await delete_thread_use_case.execute(
        DeleteThreadRequest(user_id=user_id, slug=slug, reason=reason)
    )
    response.status_code = status_for(result)
    return result


@router.post("/{slug}/solution", response_model=ActionResponse)
async def mark_solution(
    slug: str,
    request: MarkSolutionAPIRequest,
    response: Response,
    mark_solution_use_case: FromDishka[MarkSolutionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ActionResponse:
    """Mark one of the thread's replies as its solution."""
    user_id = require_user_id(jwt_service, auth_token, "resolve threads")

    result = await mark_solution_use_case.execute(
        MarkSolutionRequest(user_id=user_id, slug=slug, reply_id=request.reply_id)
    )
    response.status_code = status_for(result)
    return result


@router.delete("/{slug}/solution", response_model=ActionResponse)
async def unmark_solution(
    slug: str,
    response: Response,
    unmark_solution_use_case: FromDishka[UnmarkSolutionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ActionResponse:
    """Clear the thread's solution."""
    user_id = require_user_id(jwt_service, auth_token, "resolve threads")

    result = await unmark_solution_use_case.execute(
        UnmarkSolutionRequest(user_id=user_id, slug=slug)
    )
    response.status_code = status_for(result)
    return result
