"""Input validation errors and their HTTP rendering."""

from typing import Any, cast

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_422_UNPROCESSABLE_CONTENT

from bloglist.errors.base import BaseAppError, create_exception_handler
from bloglist.monitoring import get_logger
from bloglist.utils.helpers import host

logger = get_logger(__name__)


class FieldError(BaseAppError):
    """A single violated constraint on one field of an input record."""

    kind = "invalid"

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message, HTTP_400_BAD_REQUEST)
        self.field = field

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.detail, "type": self.kind}

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.field!r})"


class MissingFieldError(FieldError):
    """Required field is absent, null, or empty."""

    kind = "missing"

    def __init__(self, field: str) -> None:
        super().__init__(field, f"{field} is required")


class TooShortError(FieldError):
    """String field is shorter than its minimum length."""

    kind = "too_short"

    def __init__(self, field: str, min_length: int) -> None:
        super().__init__(field, f"{field} must be at least {min_length} characters long")
        self.min_length = min_length

    def to_dict(self) -> dict[str, str]:
        return {**super().to_dict(), "min_length": str(self.min_length)}


class InvalidValueError(FieldError):
    """Field is present but its value breaks a type or range rule."""

    kind = "invalid_value"

    def __init__(self, field: str, reason: str = "has an invalid value") -> None:
        super().__init__(field, f"{field} is invalid: {reason}")
        self.reason = reason


class DuplicateKeyError(FieldError):
    """Field must be unique and the value is already taken."""

    kind = "duplicate"

    def __init__(self, field: str) -> None:
        super().__init__(field, f"{field} must be unique")


class ValidationError(BaseAppError):
    """
    A candidate record failed validation.

    Carries every violated constraint found; ``detail`` joins their
    messages so substring checks on the response body stay stable.
    """

    def __init__(self, errors: list[FieldError]) -> None:
        if not errors:
            mssg = "ValidationError requires at least one field error"
            raise ValueError(mssg)
        detail = "; ".join(error.detail for error in errors)
        super().__init__(detail=detail, status_code=HTTP_400_BAD_REQUEST)
        self.errors = errors

    @property
    def fields(self) -> list[str]:
        return [error.field for error in self.errors]

    def first(self) -> FieldError:
        return self.errors[0]

    def extra(self) -> dict[str, Any]:
        return {"errors": [error.to_dict() for error in self.errors]}


validation_error_handler = create_exception_handler(logger)


async def request_validation_exception_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """
    Handle FastAPI request validation errors with a cleaner response format.

    These cover malformed path parameters and bodies that are not JSON
    objects; field rules on the payload itself raise ``ValidationError``.

    Args:
        request: The incoming request.
        exc: The RequestValidationError exception.

    Returns:
        ORJSONResponse with formatted validation errors.
    """
    exec_error = cast(RequestValidationError, exc)

    formatted_errors = []
    for error in exec_error.errors():
        formatted_error = {
            "field": ".".join(str(loc) for loc in error.get("loc", [])[1:]),
            "message": error.get("msg", "Invalid value"),
            "type": error.get("type", "validation_error"),
        }
        if "input" in error:
            formatted_error["input"] = str(error["input"])
        formatted_errors.append(formatted_error)

    logger.warning(
        f"Validation error for ip: {host(request)} at endpoint {request.url.path}: {formatted_errors}",
    )

    return ORJSONResponse(
        status_code=HTTP_422_UNPROCESSABLE_CONTENT,
        content={
            "detail": "Validation failed",
            "errors": formatted_errors,
        },
    )
