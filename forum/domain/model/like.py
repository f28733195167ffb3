"""Like entity.

Business rules:
- At most one like per user per item (enforced by a storage unique constraint)
- Likes are created and removed by toggling, never updated in place
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import LikeableType, LikeId, UserId


class Like(DomainModel):
    """Like entity with a polymorphic reference to a thread or reply."""

    id: LikeId
    user_id: UserId
    likeable_type: LikeableType
    likeable_id: UUID  # ThreadId or ReplyId
    created_at: datetime = Field(default_factory=datetime.now)


class LikeState(DomainModel):
    """Like state of an item as seen by one user."""

    liked: bool
    count: int = Field(ge=0)
