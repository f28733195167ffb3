"""Ownership and moderator predicates.

Every authorization decision in the forum is built from these pure
functions. An absent actor (logged-out user) never owns or moderates
anything.
"""

from typing import Optional, Protocol

from forum.domain.model.user import User
from forum.domain.value import UserId


class Authored(Protocol):
    """Anything with an author."""

    author_id: UserId


def is_owner(actor: Optional[User], entity: Authored) -> bool:
    """Return True iff the actor is the author of the entity."""
    if actor is None:
        return False
    return entity.author_id == actor.id


def is_moderator(actor: Optional[User]) -> bool:
    """Return True iff the actor has moderator rights."""
    return actor is not None and actor.is_moderator


def can_manage(actor: Optional[User], entity: Authored) -> bool:
    """Owners and moderators may edit, delete and resolve content."""
    return is_owner(actor, entity) or is_moderator(actor)
