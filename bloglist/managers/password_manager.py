"""
Password hashing module using Argon2 with passlib's CryptContext.

Only the derived hash is ever stored. Plaintext passwords stay inside
``UserCreate.password`` (a ``SecretStr``) until they are hashed here, and
hashes never leave the persistence layer.
"""

from asyncio import get_running_loop
from concurrent.futures import ThreadPoolExecutor

from passlib.context import CryptContext
from passlib.exc import InternalBackendError

from bloglist.configs import CONFIG_MAP, settings
from bloglist.errors import PasswordHashingError
from bloglist.monitoring import get_logger

executor = ThreadPoolExecutor(max_workers=4)
logger = get_logger(__name__)


class PasswordHasher:
    """
    A password hashing and verification manager using the Argon2id algorithm.

    This class wraps passlib's CryptContext to provide:
    - Salted hashing with a fixed cost per security level
    - Password verification
    - Transparent upgrade of hashes made with deprecated schemes or costs
    """

    def __init__(self, level: str | None = None) -> None:
        """
        Initialize the PasswordHasher with Argon2id as the primary scheme.

        Args:
            level: Security level key of ``CONFIG_MAP``; defaults to settings
        """
        self.level = level or settings.PASSWORD_SECURITY_LEVEL
        config = CONFIG_MAP[self.level]
        self.pwd_context = CryptContext(
            schemes=["argon2", "pbkdf2_sha256"],
            deprecated="pbkdf2_sha256",
            argon2__memory_cost=config.memory_cost,
            argon2__time_cost=config.time_cost,
            argon2__parallelism=config.parallelism,
        )
        logger.info(f"PasswordHasher initialized with Argon2id on level {self.level}")

    def hash(self, password: str) -> str:
        """
        Hash a plaintext password using Argon2id.

        Args:
            password: The plaintext password to hash

        Returns:
            str: The hashed password in Argon2id format

        Raises:
            ValueError: If password is empty
            PasswordHashingError: If the backend fails

        Example:
            >>> hasher = PasswordHasher()
            >>> hasher.hash("sekret").startswith("$argon2id$")
            True
        """
        if not password:
            msg = "Password cannot be empty"
            raise ValueError(msg)

        try:
            return self.pwd_context.hash(password)
        except (ValueError, InternalBackendError, UnicodeError) as e:
            logger.exception("Error hashing password")
            mssg = "Failed to hash password"
            raise PasswordHashingError(mssg) from e

    def verify(self, password: str, hashed_password: str) -> bool:
        """
        Verify a plaintext password against a hashed password.

        Unrecognized or corrupted hashes verify as False.

        Example:
            >>> hasher = PasswordHasher()
            >>> hashed = hasher.hash("my_password")
            >>> hasher.verify("my_password", hashed)
            True
            >>> hasher.verify("wrong_password", hashed)
            False
        """
        if not isinstance(hashed_password, str) or not hashed_password.strip():
            logger.warning("Invalid hash format provided")
            return False

        try:
            return self.pwd_context.verify(password, hashed_password)
        except ValueError:
            logger.exception("Stored hash is corrupted or invalid format")
            return False

    def verify_and_update(
        self,
        password: str,
        hashed_password: str | None,
    ) -> tuple[bool, str | None]:
        """
        Verify a password and return a new hash if the current one needs updating.

        A missing hash runs a dummy verification so unknown users take as
        long to reject as wrong passwords.

        Returns:
            tuple[bool, str | None]: Verification result and the replacement hash, if any
        """
        if hashed_password is None:
            self.pwd_context.dummy_verify()
            return False, None

        if not self.verify(password, hashed_password):
            return False, None

        if self.pwd_context.needs_update(hashed_password):
            logger.info(f"Password hash upgraded to level {self.level}")
            return True, self.hash(password)

        return True, None


_default_hasher: PasswordHasher | None = None


def get_password_hasher() -> PasswordHasher:
    """Get or create the default password hasher instance."""
    global _default_hasher  # noqa: PLW0603
    if _default_hasher is None:
        _default_hasher = PasswordHasher()
    return _default_hasher


async def hash_password(password: str) -> str:
    """
    Derive the stored representation of a password off the event loop.

    Example:
        >>> hashed = await hash_password("my_password")
    """
    return await get_running_loop().run_in_executor(
        executor,
        get_password_hasher().hash,
        password,
    )


async def verify_password(password: str, hashed_password: str) -> bool:
    """Check a password against its stored hash off the event loop."""
    return await get_running_loop().run_in_executor(
        executor,
        get_password_hasher().verify,
        password,
        hashed_password,
    )


async def verify_and_update_password(
    password: str,
    hashed_password: str | None,
) -> tuple[bool, str | None]:
    """Verify a password and get a new hash if needed, off the event loop."""
    return await get_running_loop().run_in_executor(
        executor,
        get_password_hasher().verify_and_update,
        password,
        hashed_password,
    )
