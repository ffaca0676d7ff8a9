# bloglist/routes/user.py

"""User registration and listing routes."""

from typing import Annotated, Any

from fastapi import APIRouter, Body
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_201_CREATED

from bloglist.dependencies import UserServiceDep
from bloglist.models import BlogDB, UserDB
from bloglist.schemas import UserBlog, UserResponse, UserWithBlogsResponse

router = APIRouter(prefix="/api/users", tags=["👤 Users"])


def db_user_to_response(db_user: UserDB) -> UserResponse:
    """Convert a `UserDB` to `UserResponse`; the password hash is not copied."""
    return UserResponse(
        id=db_user.id,
        username=db_user.username,
        name=db_user.name,
        blogs=db_user.blog_ids,
    )


def db_user_with_blogs(db_user: UserDB, blogs: list[BlogDB]) -> UserWithBlogsResponse:
    return UserWithBlogsResponse(
        id=db_user.id,
        username=db_user.username,
        name=db_user.name,
        blogs=[UserBlog.model_validate(blog) for blog in blogs],
    )


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=UserResponse,
    status_code=HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        400: {
            "description": "Validation failed",
            "content": {
                "application/json": {"example": {"detail": "username must be unique"}},
            },
        },
    },
    operation_id="users_create",
)
async def create_user(
    payload: Annotated[
        dict[str, Any],
        Body(examples=[{"username": "root", "name": "Superuser", "password": "salainen"}]),
    ],
    service: UserServiceDep,
) -> UserResponse:
    """
    Register a new user account.

    Parameters
    ----------
    payload : dict
        ``username``, optional ``name`` and ``password``.
    service : UserService
        User service dependency.

    Returns
    -------
    UserResponse
        Created user, without password or hash.
    """
    user = await service.create_user(payload)
    return db_user_to_response(user)


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[UserWithBlogsResponse],
    summary="List users",
    description="Retrieve every user with their blogs expanded.",
    operation_id="users_list",
)
async def list_users(service: UserServiceDep) -> list[UserWithBlogsResponse]:
    """List all users with their owned blogs."""
    return [db_user_with_blogs(user, blogs) for user, blogs in await service.list_users()]
