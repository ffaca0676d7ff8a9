"""User account service."""

from typing import Any

from bloglist.models import BlogDB, UserDB
from bloglist.monitoring import get_logger
from bloglist.repositories import BlogRepository, UserRepository
from bloglist.validators import validate_user_create

logger = get_logger(__name__)


class UserService:
    """Service for creating and listing user accounts."""

    def __init__(self, user_repo: UserRepository, blog_repo: BlogRepository) -> None:
        self.user_repo = user_repo
        self.blog_repo = blog_repo

    async def create_user(self, payload: dict[str, Any]) -> UserDB:
        """
        Validate a registration payload and store the new account.

        The account starts with no blogs. Only the password hash is stored.

        Args:
            payload: Raw request body

        Returns:
            UserDB: The stored user

        Raises:
            ValidationError: If a field rule fails or the username is taken
        """
        user_create = await validate_user_create(payload, self.user_repo.username_exists)
        user = await self.user_repo.create(user_create)
        logger.info("User created", user_id=str(user.id), username=user.username)
        return user

    async def list_users(self) -> list[tuple[UserDB, list[BlogDB]]]:
        """Every user with their owned blogs in creation order."""
        users = await self.user_repo.get_all()
        return [(user, await self.blog_repo.get_by_ids(user.blog_ids)) for user in users]
