"""Reply use cases."""

from .create_reply import CreateReplyRequest, CreateReplyResponse, CreateReplyUseCase
from .update_reply import UpdateReplyRequest, UpdateReplyUseCase

__all__ = [
    "CreateReplyRequest",
    "CreateReplyResponse",
    "CreateReplyUseCase",
    "UpdateReplyRequest",
    "UpdateReplyUseCase",
]
