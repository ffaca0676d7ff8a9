"""Application dependencies."""

from typing import Annotated

from fastapi import Depends, HTTPException
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import HTTP_401_UNAUTHORIZED

from bloglist.db import get_session
from bloglist.managers.token_manager import decode_access_token
from bloglist.models import UserDB
from bloglist.repositories import BlogRepository, UserRepository
from bloglist.services import AuthService, BlogService, UserService

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/login", auto_error=False)

SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_user_repository(session: SessionDep) -> UserRepository:
    """Resolve the `UserRepository` dependency."""
    return UserRepository(session)


def get_blog_repository(session: SessionDep) -> BlogRepository:
    """Resolve the `BlogRepository` dependency."""
    return BlogRepository(session)


UserRepoDep = Annotated[UserRepository, Depends(get_user_repository)]
BlogRepoDep = Annotated[BlogRepository, Depends(get_blog_repository)]


def get_blog_service(blog_repo: BlogRepoDep, user_repo: UserRepoDep) -> BlogService:
    return BlogService(blog_repo, user_repo)


def get_user_service(user_repo: UserRepoDep, blog_repo: BlogRepoDep) -> UserService:
    return UserService(user_repo, blog_repo)


def get_auth_service(user_repo: UserRepoDep) -> AuthService:
    return AuthService(user_repo)


BlogServiceDep = Annotated[BlogService, Depends(get_blog_service)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]


async def get_optional_user(
    token: Annotated[str | None, Depends(oauth2_scheme)],
    user_repo: UserRepoDep,
) -> UserDB | None:
    """
    Resolve the bearer token to a user, or None.

    Missing, malformed, expired and orphaned tokens all resolve to None.
    """
    if not token:
        return None

    token_data = decode_access_token(token)
    if not token_data:
        return None

    return await user_repo.get_by_id(token_data.user_id)


async def get_current_user(
    user: Annotated[UserDB | None, Depends(get_optional_user)],
) -> UserDB:
    """
    Require an authenticated user.

    Raises:
        HTTPException: 401 when the request carries no valid token
    """
    if user is None:
        raise HTTPException(
            status_code=HTTP_401_UNAUTHORIZED,
            detail="token missing or invalid",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


CurrentUserDep = Annotated[UserDB, Depends(get_current_user)]
OptionalUserDep = Annotated[UserDB | None, Depends(get_optional_user)]
