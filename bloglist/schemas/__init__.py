from bloglist.schemas.auth import LoginRequest, LoginResponse, TokenData
from bloglist.schemas.blog import (
    BlogCreate,
    BlogOwner,
    BlogResponse,
    BlogStatsResponse,
    BlogUpdate,
    FavouriteBlog,
)
from bloglist.schemas.health import HealthCheckResponse
from bloglist.schemas.user import UserBlog, UserCreate, UserResponse, UserWithBlogsResponse

__all__ = [
    "BlogCreate",
    "BlogOwner",
    "BlogResponse",
    "BlogStatsResponse",
    "BlogUpdate",
    "FavouriteBlog",
    "HealthCheckResponse",
    "LoginRequest",
    "LoginResponse",
    "TokenData",
    "UserBlog",
    "UserCreate",
    "UserResponse",
    "UserWithBlogsResponse",
]
