"""User aggregate root.

Users are created by the external auth system. The forum only reads them,
apart from the moderator flag.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import UserId, Username


class User(DomainModel):
    """User aggregate root."""

    id: UserId
    username: Username
    email: Optional[str] = None  # Address used by the mail relay
    is_moderator: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
