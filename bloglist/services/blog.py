"""
Blog service: creation, update and deletion of blogs with their owners.

Blog creation is a two-write protocol:

1. insert the blog with ``user_id`` set to the acting user;
2. append the new id to the owner's ``blogs`` list and save the owner.

Both writes flush through the same request-scoped session, so against a
transactional store they commit or roll back together. The protocol adds
no compensation of its own: if the second write fails, the error
propagates and whatever the session owner does with the first write
stands. A blog whose owner does not list it is reported by
``find_unlisted_blogs`` and is not repaired automatically.
"""

from typing import Any
from uuid import UUID

from bloglist.auth.ownership import authorize_delete
from bloglist.errors.database import RecordNotFoundError
from bloglist.models import BlogDB, UserDB
from bloglist.monitoring import get_logger
from bloglist.repositories import BlogRepository, UserRepository
from bloglist.utils.list_helper import favourite_blog, total_likes
from bloglist.validators import validate_blog_create, validate_blog_update

logger = get_logger(__name__)


class BlogService:
    """Service for blog operations that keep user and blog records in step."""

    def __init__(self, blog_repo: BlogRepository, user_repo: UserRepository) -> None:
        """
        Initialize the blog service.

        Args:
            blog_repo: Blog repository
            user_repo: User repository, for the owner side of the relationship
        """
        self.blog_repo = blog_repo
        self.user_repo = user_repo

    async def list_blogs(self) -> list[tuple[BlogDB, UserDB | None]]:
        """Every blog with its owner, oldest first."""
        return await self.blog_repo.get_all_with_owner()

    async def get_blog(self, blog_id: UUID) -> tuple[BlogDB, UserDB | None]:
        """
        Get one blog with its owner.

        Raises:
            RecordNotFoundError: If no blog has this id
        """
        blog = await self.blog_repo.get_or_raise(blog_id)
        return blog, await self.get_owner(blog)

    async def get_owner(self, blog: BlogDB) -> UserDB | None:
        """The user recorded as the blog's owner, or None if that row is gone."""
        return await self.user_repo.get_by_id(blog.user_id)

    async def create_blog(self, owner: UserDB, payload: dict[str, Any]) -> BlogDB:
        """
        Create a blog owned by ``owner`` and record it on the owner.

        Args:
            owner: The acting user
            payload: Raw request body

        Returns:
            BlogDB: The stored blog

        Raises:
            ValidationError: If the payload breaks a blog rule
            DatabaseError: If either write fails
        """
        blog_create = validate_blog_create(payload)

        blog = await self.blog_repo.create(blog_create, user_id=owner.id)
        await self.user_repo.append_blog(owner, blog.id)

        logger.info("Blog created", blog_id=str(blog.id), user_id=str(owner.id))
        return blog

    async def update_blog(self, blog_id: UUID, payload: dict[str, Any]) -> BlogDB:
        """
        Apply a partial field update to a blog.

        Not gated by ownership. The owner reference is never changed.

        Raises:
            ValidationError: If a supplied field breaks a blog rule
            RecordNotFoundError: If no blog has this id
        """
        blog_update = validate_blog_update(payload)

        blog = await self.blog_repo.update(blog_id, blog_update)
        if blog is None:
            raise RecordNotFoundError(detail=f"Blog with ID {blog_id} not found")

        logger.info(
            "Blog updated",
            blog_id=str(blog_id),
            fields=sorted(blog_update.model_dump(exclude_unset=True)),
        )
        return blog

    async def delete_blog(self, acting_user: UserDB, blog_id: UUID) -> None:
        """
        Delete a blog if the acting user owns it.

        Deleting an id that does not exist succeeds without effect. After
        the blog row is gone the id is dropped from the owner's list.

        Raises:
            ForbiddenError: If the blog exists and belongs to someone else
        """
        blog = await self.blog_repo.get_by_id(blog_id)
        authorize_delete(acting_user.id, blog)

        if blog is None:
            logger.info("Blog already absent", blog_id=str(blog_id))
            return

        await self.blog_repo.delete(blog_id)
        await self.user_repo.remove_blog(blog.user_id, blog_id)
        logger.info("Blog deleted", blog_id=str(blog_id), user_id=str(acting_user.id))

    async def stats(self) -> dict[str, Any]:
        """Count, total likes and favourite over all blogs."""
        blogs = await self.blog_repo.get_all()
        return {
            "count": len(blogs),
            "total_likes": total_likes(blogs),
            "favourite": favourite_blog(blogs),
        }

    async def find_unlisted_blogs(self) -> list[BlogDB]:
        """
        Blogs missing from their owner's ``blogs`` list.

        These are left behind when the second write of a creation fails
        after the first one was kept.
        """
        unlisted: list[BlogDB] = []
        for blog, owner in await self.blog_repo.get_all_with_owner():
            if owner is None or str(blog.id) not in owner.blogs:
                unlisted.append(blog)

        if unlisted:
            logger.warning("Blogs missing from owner lists", count=len(unlisted))
        return unlisted
