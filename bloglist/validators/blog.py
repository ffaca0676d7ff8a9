"""Validation of blog creation and update payloads."""

from bloglist.configs import LIKES_MAX, SHORT_TEXT_MAX_LENGTH, URL_MAX_LENGTH
from bloglist.errors.validation import ValidationError
from bloglist.schemas.blog import BlogCreate, BlogUpdate
from bloglist.validators.rules import (
    Payload,
    check,
    max_length,
    non_blank_if_present,
    non_negative_int,
    optional_text,
    required_text,
)

# Owner and id are never taken from a payload
UPDATABLE_FIELDS = ("title", "author", "url", "likes")

# Upper bounds match the column sizes of ``BlogDB``
LENGTH_RULES = (
    max_length("title", SHORT_TEXT_MAX_LENGTH),
    max_length("author", SHORT_TEXT_MAX_LENGTH),
    max_length("url", URL_MAX_LENGTH),
)

CREATE_RULES = (
    required_text("title"),
    required_text("url"),
    optional_text("author"),
    *LENGTH_RULES,
    non_negative_int("likes", LIKES_MAX),
)

UPDATE_RULES = (
    non_blank_if_present("title"),
    non_blank_if_present("url"),
    optional_text("author"),
    *LENGTH_RULES,
    non_negative_int("likes", LIKES_MAX, nullable=False),
)


def validate_blog_create(payload: Payload) -> BlogCreate:
    """
    Check a blog creation payload and normalize it.

    Args:
        payload: Raw request body

    Returns:
        BlogCreate: Normalized record, ``likes`` defaulting to 0

    Raises:
        ValidationError: With every violated constraint
    """
    if errors := check(payload, CREATE_RULES):
        raise ValidationError(errors)

    likes = payload.get("likes")
    return BlogCreate(
        title=payload["title"],
        author=payload.get("author"),
        url=payload["url"],
        likes=0 if likes is None else likes,
    )


def validate_blog_update(payload: Payload) -> BlogUpdate:
    """
    Check a partial blog update and normalize it.

    Only ``title``, ``author``, ``url`` and ``likes`` are considered; other
    keys, including any owner reference, are dropped. ``likes`` is
    re-checked exactly as on creation.

    Raises:
        ValidationError: With every violated constraint
    """
    if errors := check(payload, UPDATE_RULES):
        raise ValidationError(errors)

    return BlogUpdate(**{field: payload[field] for field in UPDATABLE_FIELDS if field in payload})
