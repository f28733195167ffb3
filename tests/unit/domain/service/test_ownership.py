"""Unit tests for ownership predicates."""

from forum.domain.service.ownership import can_manage, is_moderator, is_owner
from tests.conftest import make_thread, make_user


class TestOwnership:
    """Tests for is_owner, is_moderator and can_manage."""

    def test_author_owns_thread(self):
        author = make_user("johndoe")
        thread = make_thread(author)

        assert is_owner(author, thread)
        assert can_manage(author, thread)

    def test_other_user_does_not_own_thread(self):
        thread = make_thread(make_user("johndoe"))
        other = make_user("janedoe")

        assert not is_owner(other, thread)
        assert not can_manage(other, thread)

    def test_moderator_can_manage_any_thread(self):
        thread = make_thread(make_user("johndoe"))
        moderator = make_user("mod", is_moderator=True)

        assert not is_owner(moderator, thread)
        assert is_moderator(moderator)
        assert can_manage(moderator, thread)

    def test_absent_actor_has_no_rights(self):
        thread = make_thread(make_user("johndoe"))

        assert not is_owner(None, thread)
        assert not is_moderator(None)
        assert not can_manage(None, thread)
