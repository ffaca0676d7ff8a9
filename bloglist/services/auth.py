"""Authentication service: password login and token issue."""

from bloglist.errors.auth import InvalidCredentialsError
from bloglist.managers.password_manager import verify_and_update_password
from bloglist.managers.token_manager import create_access_token
from bloglist.models import UserDB
from bloglist.monitoring import get_logger
from bloglist.repositories import UserRepository
from bloglist.schemas.auth import LoginResponse

logger = get_logger(__name__)


class AuthService:
    """Service for handling user authentication."""

    def __init__(self, user_repo: UserRepository) -> None:
        """
        Initialize the auth service.

        Args:
            user_repo: User repository for database operations
        """
        self.user_repo = user_repo

    async def authenticate_user(self, username: str, password: str) -> UserDB:
        """
        Authenticate a user by username and password.

        A hash made with outdated parameters is replaced on success.

        Raises:
            InvalidCredentialsError: If the user is unknown or the password is wrong
        """
        user = await self.user_repo.get_by_username(username)
        is_valid, new_hash = await verify_and_update_password(
            password,
            user.password_hash if user else None,
        )

        if not user or not is_valid:
            logger.warning("Failed login attempt", username=username)
            raise InvalidCredentialsError

        if new_hash:
            await self.user_repo.set_password_hash(user, new_hash)

        return user

    async def login(self, username: str, password: str) -> LoginResponse:
        """Authenticate and issue an access token."""
        user = await self.authenticate_user(username, password)
        token = create_access_token(user_id=user.id, username=user.username)
        logger.info("User logged in", user_id=str(user.id))
        return LoginResponse(token=token, username=user.username, name=user.name)
