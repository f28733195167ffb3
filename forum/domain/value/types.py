"""Domain value objects for the forum.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from forum.domain.value.common import RootValueObject

# Characters allowed in a username, shared with the mention tokenizer
USERNAME_CHARS = "A-Za-z0-9_"
USERNAME_MAX_LENGTH = 40


class LikeableType(str, Enum):
    """Type of entity that can be liked."""

    THREAD = "thread"
    REPLY = "reply"


class ReplyableType(str, Enum):
    """Type of entity a reply can be attached to."""

    THREAD = "thread"


class NotificationKind(str, Enum):
    """Kind of notification sent to a user."""

    MENTION = "mention"
    THREAD_DELETED = "thread_deleted"


class Username(RootValueObject[str]):
    """Unique platform username.

    Letters, digits and underscores, 1-40 characters. Matching against
    stored usernames is exact (case-sensitive).
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if not re.fullmatch(rf"[{USERNAME_CHARS}]{{1,{USERNAME_MAX_LENGTH}}}", v):
            raise ValueError(
                f"Username must be 1-{USERNAME_MAX_LENGTH} characters: "
                "letters, digits or underscores"
            )
        return v


class Slug(RootValueObject[str]):
    """URL-safe slug for threads.

    Must be lowercase, alphanumeric with hyphens, 1-100 characters.
    Examples: 'how-to-work-with-eloquent', 'thread-1a2b3c4d'
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug format."""
        if not re.match(r"^[a-z0-9]+(?:-[a-z0-9]+)*$", v):
            raise ValueError(
                "Slug must be lowercase alphanumeric with hyphens, "
                "no leading/trailing hyphens or consecutive hyphens"
            )
        if len(v) < 1 or len(v) > 100:
            raise ValueError("Slug must be 1-100 characters")
        return v
