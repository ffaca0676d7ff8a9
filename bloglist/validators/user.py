"""Validation of user creation payloads."""

from collections.abc import Awaitable, Callable

from pydantic import SecretStr

from bloglist.configs import PASSWORD_MIN_LENGTH, SHORT_TEXT_MAX_LENGTH, USERNAME_MIN_LENGTH
from bloglist.errors.validation import DuplicateKeyError, ValidationError
from bloglist.schemas.user import UserCreate
from bloglist.validators.rules import (
    Payload,
    check,
    first_error_per_field,
    max_length,
    optional_text,
    required_min_length,
)

type UsernameExists = Callable[[str], Awaitable[bool]]

CREATE_RULES = (
    required_min_length("username", USERNAME_MIN_LENGTH),
    max_length("username", SHORT_TEXT_MAX_LENGTH),
    optional_text("name"),
    max_length("name", SHORT_TEXT_MAX_LENGTH),
    required_min_length("password", PASSWORD_MIN_LENGTH),
)


async def validate_user_create(
    payload: Payload,
    username_exists: UsernameExists,
) -> UserCreate:
    """
    Check a user creation payload and normalize it.

    Uniqueness is only looked up once the username is otherwise valid. The
    lookup is an early rejection; the unique index on ``users.username``
    still guards concurrent creations.

    Args:
        payload: Raw request body
        username_exists: Read-only predicate over stored usernames

    Returns:
        UserCreate: Normalized record holding the plaintext password as a secret

    Raises:
        ValidationError: With the first violation of each field
    """
    errors = first_error_per_field(check(payload, CREATE_RULES))

    if "username" not in {error.field for error in errors} and await username_exists(
        payload["username"],
    ):
        errors.insert(0, DuplicateKeyError("username"))

    if errors:
        raise ValidationError(errors)

    return UserCreate(
        username=payload["username"],
        name=payload.get("name"),
        password=SecretStr(payload["password"]),
    )
