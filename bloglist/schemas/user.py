"""User schemas. None of them carry a password or its hash outward."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, SecretStr


class UserCreate(BaseModel):
    """Normalized user creation payload."""

    model_config = ConfigDict(frozen=True)

    username: str
    name: str | None = None
    password: SecretStr


class UserBlog(BaseModel):
    """Blog subset embedded in user listings."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    author: str | None = None
    url: str
    likes: int


class UserResponse(BaseModel):
    """Outward representation of a user."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "username": "root",
                "name": "Superuser",
                "blogs": [],
            },
        },
    )

    id: UUID
    username: str
    name: str | None = None
    blogs: list[UUID] = []


class UserWithBlogsResponse(BaseModel):
    """User with owned blogs expanded, in creation order."""

    id: UUID
    username: str
    name: str | None = None
    blogs: list[UserBlog] = []
