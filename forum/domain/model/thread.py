"""Thread aggregate root.

Threads are the top-level posts of the forum. Subject rules (length, no
URLs) are enforced by the content validator so callers get field-level
errors; the model only guards against structurally invalid data.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from forum.domain.model.common import DomainModel
from forum.domain.value import ReplyId, Slug, TagId, ThreadId, UserId


class Thread(DomainModel):
    """Thread aggregate root.

    - author_id never changes after creation
    - last_activity_at moves on creation and on new replies, never on edit
    - solution_reply_id, if set, points at a reply of this thread
    """

    id: ThreadId
    slug: Slug
    subject: str = Field(min_length=1)
    body: str = Field(min_length=1)
    author_id: UserId
    tag_ids: frozenset[TagId] = frozenset()
    solution_reply_id: Optional[ReplyId] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    last_activity_at: datetime = Field(default_factory=datetime.now)

    @field_validator("tag_ids", mode="before")
    @classmethod
    def coerce_tag_ids(cls, v):
        """Accept any iterable of tag ids; order is irrelevant."""
        return frozenset(v or ())

    @property
    def is_resolved(self) -> bool:
        """Whether a solution reply has been chosen."""
        return self.solution_reply_id is not None
