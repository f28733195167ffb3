"""Strongly typed identifiers for forum domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
ThreadId = NewType("ThreadId", UUID)
ReplyId = NewType("ReplyId", UUID)
LikeId = NewType("LikeId", UUID)
NotificationId = NewType("NotificationId", UUID)
TagId = NewType("TagId", UUID)
