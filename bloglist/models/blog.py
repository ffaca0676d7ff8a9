"""Blog database model using SQLModel."""

from datetime import UTC, datetime
from typing import cast
from uuid import UUID, uuid4

from pydantic import ConfigDict
from sqlalchemy import DateTime, ForeignKey, Integer, Uuid
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel, String

from bloglist.configs import SHORT_TEXT_MAX_LENGTH, URL_MAX_LENGTH


class BlogDB(SQLModel, table=True):
    """
    Blog database model.

    ``user_id`` is the owner, set once at creation. Field updates never
    touch it.
    """

    __tablename__ = cast("declared_attr[str]", "blogs")

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="Blog ID",
    )

    user_id: UUID = Field(
        sa_column=Column(
            "user_id",
            Uuid,
            ForeignKey("users.id"),
            nullable=False,
            index=True,
        ),
        description="Owner ID (foreign key to users.id)",
    )

    title: str = Field(
        sa_column=Column(String(SHORT_TEXT_MAX_LENGTH), nullable=False),
        description="Blog title",
    )
    author: str | None = Field(
        default=None,
        sa_column=Column(String(SHORT_TEXT_MAX_LENGTH)),
        description="Blog author",
    )
    url: str = Field(
        sa_column=Column(String(URL_MAX_LENGTH), nullable=False),
        description="Blog URL",
    )
    likes: int = Field(
        default=0,
        sa_column=Column(Integer, nullable=False, default=0),
        description="Like count (never negative)",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(tz=UTC),
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True),
        description="Creation timestamp",
    )
    updated_at: datetime | None = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True)),
        description="Last update timestamp",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "user_id": "123e4567-e89b-12d3-a456-426614174000",
                "title": "Canonical string reduction",
                "author": "Edsger W. Dijkstra",
                "url": "http://www.cs.utexas.edu/~EWD/transcriptions/EWD08xx/EWD808.html",
                "likes": 12,
            },
        },
    )
