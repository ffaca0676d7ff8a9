"""
Blog schemas.

Input schemas hold payloads already normalized by the validators in
``bloglist.validators``; they carry no constraints of their own. Response
schemas define the outward representation of a blog.
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class BlogCreate(BaseModel):
    """Normalized blog creation payload."""

    title: str
    author: str | None = None
    url: str
    likes: int = 0


class BlogUpdate(BaseModel):
    """Normalized partial update; only explicitly set fields are applied."""

    title: str | None = None
    author: str | None = None
    url: str | None = None
    likes: int | None = None


class BlogOwner(BaseModel):
    """Owner subset embedded in blog responses."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    name: str | None = None


class BlogResponse(BaseModel):
    """Outward representation of a blog."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "title": "React patterns",
                "author": "Michael Chan",
                "url": "https://reactpatterns.com/",
                "likes": 7,
                "user": {
                    "id": "123e4567-e89b-12d3-a456-426614174000",
                    "username": "root",
                    "name": "Superuser",
                },
            },
        },
    )

    id: UUID
    title: str
    author: str | None = None
    url: str
    likes: int = Field(ge=0)
    user: BlogOwner | None = None


class FavouriteBlog(BaseModel):
    title: str
    author: str | None = None
    likes: int


class BlogStatsResponse(BaseModel):
    """Aggregate statistics over all blogs."""

    count: int
    total_likes: int
    favourite: FavouriteBlog | None = None
