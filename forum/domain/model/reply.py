"""Reply entity.

Replies are flat responses attached to a repliable entity (a thread).
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import ReplyableType, ReplyId, UserId


class Reply(DomainModel):
    """Reply entity."""

    id: ReplyId
    body: str = Field(min_length=1)
    author_id: UserId
    replyable_type: ReplyableType = ReplyableType.THREAD
    replyable_id: UUID
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
