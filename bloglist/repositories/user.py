"""User repository for database operations."""

from uuid import UUID

from bloglist.errors.database import DuplicateEntryError
from bloglist.errors.validation import DuplicateKeyError, ValidationError
from bloglist.managers import hash_password
from bloglist.models.user import UserDB
from bloglist.repositories.base import BaseRepository
from bloglist.schemas.user import UserCreate


class UserRepository(BaseRepository[UserDB]):
    """
    Repository for User database operations.

    This class implements the repository pattern for User entities,
    including maintenance of the owned-blog list.
    """

    model = UserDB

    async def create(self, user: UserCreate) -> UserDB:
        """
        Create a new user, storing only the derived password hash.

        Args:
            user: Normalized user payload

        Returns:
            UserDB: Created user database model

        Raises:
            ValidationError: If the username is taken at storage level
            DatabaseError: For other database errors
        """
        password_hash = await hash_password(user.password.get_secret_value())

        db_user = UserDB(
            username=user.username,
            name=user.name,
            password_hash=password_hash,
            blogs=[],
        )

        try:
            return await self.add(db_user)
        except DuplicateEntryError as e:
            if "username" in e.detail.lower():
                raise ValidationError([DuplicateKeyError("username")]) from e
            raise

    async def get_by_username(self, username: str) -> UserDB | None:
        """Get user by username (case-sensitive)."""
        return await self.get_by_field("username", username)

    async def username_exists(self, username: str) -> bool:
        """Check whether a username is already taken."""
        return await self._check_exists_by_field("username", username)

    async def append_blog(self, user: UserDB, blog_id: UUID) -> UserDB:
        """
        Append a blog id to the user's owned list and persist the user.

        The list is replaced rather than mutated so the JSON column is
        flagged dirty.
        """
        user.blogs = [*user.blogs, str(blog_id)]
        return await self.add(user)

    async def remove_blog(self, user_id: UUID, blog_id: UUID) -> UserDB | None:
        """
        Drop a blog id from a user's owned list.

        Returns:
            UserDB | None: The updated user, or None when the user is gone
        """
        user = await self.get_by_id(user_id)
        if not user:
            return None

        remaining = [owned for owned in user.blogs if owned != str(blog_id)]
        if remaining != user.blogs:
            user.blogs = remaining
            return await self.add(user)
        return user

    async def set_password_hash(self, user: UserDB, password_hash: str) -> UserDB:
        """Replace the stored hash, e.g. after a cost upgrade."""
        user.password_hash = password_hash
        return await self.add(user)
