# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os

# Must be set before bloglist is imported anywhere
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["ENVIRONMENT"] = "testing"
os.environ["PASSWORD_SECURITY_LEVEL"] = "low"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["LOG_TO_FILE"] = "false"

from collections.abc import AsyncGenerator, Awaitable, Callable
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from bloglist.db import async_session_maker, drop_db, init_db
from bloglist.main import app

type CreateUser = Callable[..., Awaitable[dict[str, Any]]]
type LoginAs = Callable[[str, str], Awaitable[dict[str, str]]]


@pytest.fixture(autouse=True)
async def fresh_database() -> AsyncGenerator[None]:
    """Recreate every table so each test starts from an empty store."""
    await drop_db()
    await init_db()
    yield
    app.dependency_overrides = {}


@pytest.fixture
async def session() -> AsyncGenerator[AsyncSession]:
    """A session outside any request, committed by the test itself."""
    async with async_session_maker() as db_session:
        yield db_session


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for testing FastAPI endpoints."""
    async with AsyncClient(
        base_url="http://test",
        transport=ASGITransport(app=app),
    ) as ac:
        yield ac


@pytest.fixture
def create_user(client: AsyncClient) -> CreateUser:
    """Register a user through the API and return the response body."""

    async def _create(
        username: str = "root",
        name: str | None = "Superuser",
        password: str = "salainen",
    ) -> dict[str, Any]:
        response = await client.post(
            "/api/users",
            json={"username": username, "name": name, "password": password},
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def login_as(client: AsyncClient) -> LoginAs:
    """Log in through the API and return bearer auth headers."""

    async def _login(username: str, password: str) -> dict[str, str]:
        response = await client.post(
            "/api/login",
            json={"username": username, "password": password},
        )
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['token']}"}

    return _login


@pytest.fixture
def blog_payload() -> dict[str, Any]:
    return {
        "title": "React patterns",
        "author": "Michael Chan",
        "url": "https://reactpatterns.com/",
        "likes": 7,
    }
