"""Validation engine: explicit field rules composed per record kind."""

from bloglist.validators.blog import validate_blog_create, validate_blog_update
from bloglist.validators.user import validate_user_create

__all__ = ["validate_blog_create", "validate_blog_update", "validate_user_create"]
