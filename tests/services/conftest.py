"""Fixtures for service tests run against the in-memory database."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from bloglist.models import UserDB
from bloglist.repositories import BlogRepository, UserRepository
from bloglist.schemas import UserCreate
from bloglist.services import AuthService, BlogService, UserService


@pytest.fixture
def user_repo(session: AsyncSession) -> UserRepository:
    return UserRepository(session)


@pytest.fixture
def blog_repo(session: AsyncSession) -> BlogRepository:
    return BlogRepository(session)


@pytest.fixture
def blog_service(blog_repo: BlogRepository, user_repo: UserRepository) -> BlogService:
    return BlogService(blog_repo, user_repo)


@pytest.fixture
def user_service(user_repo: UserRepository, blog_repo: BlogRepository) -> UserService:
    return UserService(user_repo, blog_repo)


@pytest.fixture
def auth_service(user_repo: UserRepository) -> AuthService:
    return AuthService(user_repo)


@pytest.fixture
async def root_user(user_repo: UserRepository) -> UserDB:
    return await user_repo.create(UserCreate(username="root", name="Superuser", password="sekret"))


@pytest.fixture
async def other_user(user_repo: UserRepository) -> UserDB:
    return await user_repo.create(UserCreate(username="miguel", name="Miguel", password="sekret"))
