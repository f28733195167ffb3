"""Thread use cases."""

from .create_thread import (
    CreateThreadRequest,
    CreateThreadResponse,
    CreateThreadUseCase,
)
from .delete_thread import DeleteThreadRequest, DeleteThreadUseCase
from .get_thread import GetThreadRequest, GetThreadResponse, GetThreadUseCase, ReplyItem
from .mark_solution import MarkSolutionRequest, MarkSolutionUseCase
from .unmark_solution import UnmarkSolutionRequest, UnmarkSolutionUseCase
from .update_thread import UpdateThreadRequest, UpdateThreadUseCase

__all__ = [
    "CreateThreadRequest",
    "CreateThreadResponse",
    "CreateThreadUseCase",
    "DeleteThreadRequest",
    "DeleteThreadUseCase",
    "GetThreadRequest",
    "GetThreadResponse",
    "GetThreadUseCase",
    "MarkSolutionRequest",
    "MarkSolutionUseCase",
    "ReplyItem",
    "UnmarkSolutionRequest",
    "UnmarkSolutionUseCase",
    "UpdateThreadRequest",
    "UpdateThreadUseCase",
]
