"""Tests for the blog ownership rules."""

from uuid import uuid4

import pytest

from bloglist.auth import authorize_delete, is_owner
from bloglist.errors import ForbiddenError
from bloglist.models import BlogDB


@pytest.fixture
def blog() -> BlogDB:
    return BlogDB(user_id=uuid4(), title="Type wars", author="Robert C. Martin", url="http://x", likes=2)


class TestIsOwner:
    def test_owner(self, blog: BlogDB) -> None:
        assert is_owner(blog.user_id, blog)

    def test_other_user(self, blog: BlogDB) -> None:
        assert not is_owner(uuid4(), blog)


class TestAuthorizeDelete:
    """Tests for authorize_delete."""

    def test_owner_allowed(self, blog: BlogDB) -> None:
        authorize_delete(blog.user_id, blog)

    def test_absent_blog_allowed(self) -> None:
        authorize_delete(uuid4(), None)

    def test_other_user_forbidden(self, blog: BlogDB) -> None:
        with pytest.raises(ForbiddenError) as exc_info:
            authorize_delete(uuid4(), blog)
        assert exc_info.value.status_code == 403
        assert exc_info.value.detail == "forbidden - you can only delete your own blog"
