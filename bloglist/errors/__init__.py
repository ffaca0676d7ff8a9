from bloglist.errors.auth import (
    ForbiddenError,
    InvalidCredentialsError,
    UserAuthenticationError,
    auth_exception_handler,
)
from bloglist.errors.base import BaseAppError, create_exception_handler
from bloglist.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    DuplicateEntryError,
    RecordNotFoundError,
    database_exception_handler,
)
from bloglist.errors.password_hasher import (
    PasswordHashingError,
    password_hashing_exception_handler,
)
from bloglist.errors.validation import (
    DuplicateKeyError,
    FieldError,
    InvalidValueError,
    MissingFieldError,
    TooShortError,
    ValidationError,
    request_validation_exception_handler,
    validation_error_handler,
)

__all__ = [
    "BaseAppError",
    "DatabaseConnectionError",
    "DatabaseError",
    "DuplicateEntryError",
    "DuplicateKeyError",
    "FieldError",
    "ForbiddenError",
    "InvalidCredentialsError",
    "InvalidValueError",
    "MissingFieldError",
    "PasswordHashingError",
    "RecordNotFoundError",
    "TooShortError",
    "UserAuthenticationError",
    "ValidationError",
    "auth_exception_handler",
    "create_exception_handler",
    "database_exception_handler",
    "password_hashing_exception_handler",
    "request_validation_exception_handler",
    "validation_error_handler",
]
