"""Blog repository for database operations."""

from collections.abc import Sequence
from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import select

from bloglist.models.blog import BlogDB
from bloglist.models.user import UserDB
from bloglist.repositories.base import BaseRepository
from bloglist.schemas.blog import BlogCreate, BlogUpdate


class BlogRepository(BaseRepository[BlogDB]):
    """
    Repository for Blog database operations.

    Writes here touch only the ``blogs`` table. Keeping ``UserDB.blogs``
    in step is the caller's job (see ``BlogService``).
    """

    model = BlogDB

    async def create(self, blog: BlogCreate, user_id: UUID) -> BlogDB:
        """
        Insert a new blog owned by ``user_id``.

        Args:
            blog: Normalized blog payload
            user_id: UUID of the owning user

        Returns:
            BlogDB: Created blog database model
        """
        db_blog = BlogDB(
            user_id=user_id,
            title=blog.title,
            author=blog.author,
            url=blog.url,
            likes=blog.likes,
            created_at=datetime.now(tz=UTC),
        )
        return await self.add(db_blog)

    async def update(self, blog_id: UUID, blog_update: BlogUpdate) -> BlogDB | None:  # type: ignore[override]
        """
        Update blog fields.

        Args:
            blog_id: Blog UUID
            blog_update: Normalized partial update

        Returns:
            BlogDB | None: Updated blog if found, None otherwise
        """
        return await super().update(
            blog_id,
            blog_update,
            updated_at=datetime.now(tz=UTC),
        )

    async def get_all_with_owner(self) -> list[tuple[BlogDB, UserDB | None]]:
        """
        Get every blog joined with its owner, oldest first.

        A blog whose owner row is missing comes back paired with None.
        """
        statement = (
            select(BlogDB, UserDB)
            .join(UserDB, BlogDB.user_id == UserDB.id, isouter=True)  # type: ignore[arg-type]
            .order_by(BlogDB.created_at)  # type: ignore[arg-type]
        )
        result = await self.session.execute(statement)
        return [(blog, owner) for blog, owner in result.all()]

    async def get_by_ids(self, blog_ids: Sequence[UUID]) -> list[BlogDB]:
        """
        Get the blogs with the given ids, in the order the ids are given.

        Ids without a stored blog are skipped.
        """
        if not blog_ids:
            return []

        statement = select(BlogDB).where(BlogDB.id.in_(blog_ids))  # type: ignore[attr-defined]
        result = await self.session.execute(statement)
        by_id = {blog.id: blog for blog in result.scalars().all()}
        return [by_id[blog_id] for blog_id in blog_ids if blog_id in by_id]
