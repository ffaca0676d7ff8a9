"""User database model using SQLModel."""

from datetime import UTC, datetime
from typing import cast
from uuid import UUID, uuid4

from pydantic import ConfigDict
from sqlalchemy import JSON, DateTime
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel, String

from bloglist.configs import SHORT_TEXT_MAX_LENGTH


class UserDB(SQLModel, table=True):
    """
    User database model.

    ``blogs`` holds the ids of the blogs this user owns, in creation
    order. It mirrors ``BlogDB.user_id`` and is maintained by
    ``BlogService``; every id listed here must name a blog whose
    ``user_id`` is this user's id.
    """

    __tablename__ = cast("declared_attr[str]", "users")

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="User ID",
    )

    # Unique index is the authoritative uniqueness guard
    username: str = Field(
        sa_column=Column(String(SHORT_TEXT_MAX_LENGTH), unique=True, nullable=False, index=True),
        description="Username (unique, case-sensitive)",
    )
    name: str | None = Field(
        default=None,
        sa_column=Column(String(SHORT_TEXT_MAX_LENGTH)),
        description="Display name",
    )
    password_hash: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Derived password hash",
    )

    blogs: list[str] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False),
        description="Owned blog IDs in creation order",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(tz=UTC),
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Creation timestamp",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "username": "root",
                "name": "Superuser",
                "blogs": ["550e8400-e29b-41d4-a716-446655440000"],
            },
        },
    )

    @property
    def blog_ids(self) -> list[UUID]:
        return [UUID(blog_id) for blog_id in self.blogs]
