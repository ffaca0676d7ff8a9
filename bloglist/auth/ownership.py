"""
Ownership rules for blog mutations.

Only deletion is gated: a blog may be deleted by the user recorded as its
owner and by nobody else. Field updates are not checked here;
any authenticated or anonymous caller reaching the update operation can
change title, author, url and likes.
"""

from uuid import UUID

from bloglist.errors.auth import ForbiddenError
from bloglist.models.blog import BlogDB
from bloglist.monitoring import get_logger

logger = get_logger(__name__)


def is_owner(acting_user_id: UUID, blog: BlogDB) -> bool:
    """Return True when ``acting_user_id`` is the blog's recorded owner."""
    return blog.user_id == acting_user_id


def authorize_delete(acting_user_id: UUID, blog: BlogDB | None) -> None:
    """
    Allow or deny deleting ``blog`` on behalf of ``acting_user_id``.

    An absent blog is allowed so deletion stays idempotent.

    Args:
        acting_user_id: Id of the authenticated user
        blog: Target blog, or None when it no longer exists

    Raises:
        ForbiddenError: If the acting user does not own the blog
    """
    if blog is None or is_owner(acting_user_id, blog):
        return

    logger.warning(
        "Forbidden blog deletion",
        blog_id=str(blog.id),
        acting_user_id=str(acting_user_id),
    )
    raise ForbiddenError
