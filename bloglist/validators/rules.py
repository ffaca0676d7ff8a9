"""
Field rules for the validation engine.

Each rule inspects one field of a raw payload and returns the violated
constraint as a ``FieldError``, or ``None`` when the field passes. Rules
never mutate the payload; record validators compose them with ``check``.
"""

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from bloglist.errors.validation import (
    FieldError,
    InvalidValueError,
    MissingFieldError,
    TooShortError,
)

type Payload = Mapping[str, Any]
type Rule = Callable[[Payload], FieldError | None]

NON_NEGATIVE_INT_REASON = "must be a non-negative integer"
STRING_REASON = "must be a string"


def required_text(field: str) -> Rule:
    """Field must be present and a non-blank string."""

    def rule(payload: Payload) -> FieldError | None:
        value = payload.get(field)
        if value is None:
            return MissingFieldError(field)
        if not isinstance(value, str):
            return InvalidValueError(field, STRING_REASON)
        if not value.strip():
            return MissingFieldError(field)
        return None

    return rule


def required_min_length(field: str, minimum: int) -> Rule:
    """
    Field must be present and a string of at least ``minimum`` characters.

    Absent or null is ``MissingFieldError``. Anything else that is not such
    a string, including a non-string value, is ``TooShortError``.
    """

    def rule(payload: Payload) -> FieldError | None:
        value = payload.get(field)
        if value is None:
            return MissingFieldError(field)
        if not isinstance(value, str) or len(value) < minimum:
            return TooShortError(field, minimum)
        return None

    return rule


def non_blank_if_present(field: str) -> Rule:
    """Field may be omitted, but when supplied it obeys ``required_text``."""
    required = required_text(field)

    def rule(payload: Payload) -> FieldError | None:
        if field not in payload:
            return None
        return required(payload)

    return rule


def optional_text(field: str) -> Rule:
    """Field may be omitted or null; otherwise it must be a string."""

    def rule(payload: Payload) -> FieldError | None:
        value = payload.get(field)
        if value is None or isinstance(value, str):
            return None
        return InvalidValueError(field, STRING_REASON)

    return rule


def max_length(field: str, maximum: int) -> Rule:
    """
    String field must be at most ``maximum`` characters long.

    Absent or non-string values pass; other rules report those.
    """

    def rule(payload: Payload) -> FieldError | None:
        value = payload.get(field)
        if isinstance(value, str) and len(value) > maximum:
            return InvalidValueError(field, f"must be at most {maximum} characters long")
        return None

    return rule


def non_negative_int(field: str, maximum: int, *, nullable: bool = True) -> Rule:
    """
    Field, when present, must be an integer between 0 and ``maximum``.

    Booleans are rejected even though Python treats them as ints. With
    ``nullable`` an explicit null counts as absent.
    """

    def rule(payload: Payload) -> FieldError | None:
        if field not in payload:
            return None
        value = payload[field]
        if value is None:
            return None if nullable else InvalidValueError(field, NON_NEGATIVE_INT_REASON)
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            return InvalidValueError(field, NON_NEGATIVE_INT_REASON)
        if value > maximum:
            return InvalidValueError(field, f"must not exceed {maximum}")
        return None

    return rule


def check(payload: Payload, rules: Iterable[Rule]) -> list[FieldError]:
    """Run every rule and collect the violations in rule order."""
    errors: list[FieldError] = []
    for rule in rules:
        if (error := rule(payload)) is not None:
            errors.append(error)
    return errors


def first_error_per_field(errors: Iterable[FieldError]) -> list[FieldError]:
    """Keep only the first violation reported for each field."""
    seen: set[str] = set()
    kept: list[FieldError] = []
    for error in errors:
        if error.field not in seen:
            seen.add(error.field)
            kept.append(error)
    return kept
