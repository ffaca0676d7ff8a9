"""Tests for the /api/blogs endpoints."""

from typing import Any
from unittest.mock import patch
from uuid import uuid4

import pytest
from fastapi import status
from httpx import AsyncClient

from bloglist.managers.token_manager import create_access_token
from bloglist.repositories import BlogRepository


@pytest.fixture
async def root_headers(create_user: Any, login_as: Any) -> dict[str, str]:
    await create_user("root", "Superuser", "salainen")
    return await login_as("root", "salainen")


@pytest.fixture
async def miguel_headers(create_user: Any, login_as: Any) -> dict[str, str]:
    await create_user("miguel", "Miguel", "sekret")
    return await login_as("miguel", "sekret")


class TestCreateBlog:
    """Tests for POST /api/blogs."""

    async def test_created_with_owner(
        self,
        client: AsyncClient,
        root_headers: dict[str, str],
        blog_payload: dict[str, Any],
    ) -> None:
        response = await client.post("/api/blogs", json=blog_payload, headers=root_headers)

        assert response.status_code == status.HTTP_201_CREATED
        body = response.json()
        assert body["title"] == blog_payload["title"]
        assert body["likes"] == 7
        assert body["user"]["username"] == "root"
        assert "password_hash" not in body["user"]

        users = (await client.get("/api/users")).json()
        assert [blog["id"] for blog in users[0]["blogs"]] == [body["id"]]

    async def test_likes_default_to_zero(self, client: AsyncClient, root_headers: dict[str, str]) -> None:
        response = await client.post(
            "/api/blogs",
            json={"title": "Type wars", "url": "http://blog.cleancoder.com/"},
            headers=root_headers,
        )
        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["likes"] == 0

    @pytest.mark.parametrize("missing", ["title", "url"])
    async def test_missing_required_field(
        self,
        client: AsyncClient,
        root_headers: dict[str, str],
        blog_payload: dict[str, Any],
        missing: str,
    ) -> None:
        blog_payload.pop(missing)

        response = await client.post("/api/blogs", json=blog_payload, headers=root_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        body = response.json()
        assert f"{missing} is required" in body["detail"]
        assert body["errors"] == [
            {"field": missing, "message": f"{missing} is required", "type": "missing"},
        ]
        assert (await client.get("/api/blogs")).json() == []

    async def test_negative_likes(
        self,
        client: AsyncClient,
        root_headers: dict[str, str],
        blog_payload: dict[str, Any],
    ) -> None:
        response = await client.post(
            "/api/blogs",
            json={**blog_payload, "likes": -3},
            headers=root_headers,
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "likes is invalid" in response.json()["detail"]

    async def test_without_token(self, client: AsyncClient, blog_payload: dict[str, Any]) -> None:
        response = await client.post("/api/blogs", json=blog_payload)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["detail"] == "token missing or invalid"

    async def test_token_of_deleted_user(self, client: AsyncClient, blog_payload: dict[str, Any]) -> None:
        token = create_access_token(uuid4(), "ghost")
        response = await client.post(
            "/api/blogs",
            json=blog_payload,
            headers={"Authorization": f"Bearer {token}"},
        )
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    async def test_body_must_be_object(self, client: AsyncClient, root_headers: dict[str, str]) -> None:
        response = await client.post("/api/blogs", json=["not", "an", "object"], headers=root_headers)
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT

    @pytest.mark.parametrize(
        ("field", "value"),
        [("likes", 2**70), ("title", "t" * 256), ("author", "a" * 256), ("url", "u" * 2049)],
    )
    async def test_values_beyond_column_limits(
        self,
        client: AsyncClient,
        root_headers: dict[str, str],
        blog_payload: dict[str, Any],
        field: str,
        value: object,
    ) -> None:
        response = await client.post(
            "/api/blogs",
            json={**blog_payload, field: value},
            headers=root_headers,
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["errors"][0]["field"] == field
        assert response.json()["errors"][0]["type"] == "invalid_value"
        assert (await client.get("/api/blogs")).json() == []


class TestReadBlogs:
    async def test_list_populates_owner(
        self,
        client: AsyncClient,
        root_headers: dict[str, str],
        blog_payload: dict[str, Any],
    ) -> None:
        await client.post("/api/blogs", json=blog_payload, headers=root_headers)

        blogs = (await client.get("/api/blogs")).json()

        assert len(blogs) == 1
        assert set(blogs[0]["user"]) == {"id", "username", "name"}
        assert blogs[0]["user"]["name"] == "Superuser"

    async def test_get_by_id(
        self,
        client: AsyncClient,
        root_headers: dict[str, str],
        blog_payload: dict[str, Any],
    ) -> None:
        created = (await client.post("/api/blogs", json=blog_payload, headers=root_headers)).json()

        response = await client.get(f"/api/blogs/{created['id']}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == created

    async def test_get_unknown(self, client: AsyncClient) -> None:
        response = await client.get(f"/api/blogs/{uuid4()}")
        assert response.status_code == status.HTTP_404_NOT_FOUND

    async def test_get_malformed_id(self, client: AsyncClient) -> None:
        response = await client.get("/api/blogs/not-a-uuid")
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT

    async def test_stats(
        self,
        client: AsyncClient,
        root_headers: dict[str, str],
        blog_payload: dict[str, Any],
    ) -> None:
        await client.post("/api/blogs", json=blog_payload, headers=root_headers)
        await client.post(
            "/api/blogs",
            json={**blog_payload, "title": "Canonical string reduction", "likes": 12},
            headers=root_headers,
        )

        stats = (await client.get("/api/blogs/stats")).json()

        assert stats["count"] == 2
        assert stats["total_likes"] == 19
        assert stats["favourite"]["title"] == "Canonical string reduction"


class TestUpdateBlog:
    """Tests for PUT /api/blogs/{id}."""

    async def test_update_likes(
        self,
        client: AsyncClient,
        root_headers: dict[str, str],
        blog_payload: dict[str, Any],
    ) -> None:
        created = (await client.post("/api/blogs", json=blog_payload, headers=root_headers)).json()

        response = await client.put(f"/api/blogs/{created['id']}", json={"likes": 8})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["likes"] == 8
        assert response.json()["title"] == blog_payload["title"]
        assert response.json()["user"]["username"] == "root"

    async def test_non_owner_may_update(
        self,
        client: AsyncClient,
        root_headers: dict[str, str],
        miguel_headers: dict[str, str],
        blog_payload: dict[str, Any],
    ) -> None:
        created = (await client.post("/api/blogs", json=blog_payload, headers=root_headers)).json()

        response = await client.put(
            f"/api/blogs/{created['id']}",
            json={"title": "Renamed"},
            headers=miguel_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["title"] == "Renamed"
        assert response.json()["user"]["username"] == "root"

    async def test_negative_likes(
        self,
        client: AsyncClient,
        root_headers: dict[str, str],
        blog_payload: dict[str, Any],
    ) -> None:
        created = (await client.post("/api/blogs", json=blog_payload, headers=root_headers)).json()

        response = await client.put(f"/api/blogs/{created['id']}", json={"likes": -1})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert (await client.get(f"/api/blogs/{created['id']}")).json()["likes"] == 7

    async def test_unknown_blog(self, client: AsyncClient) -> None:
        response = await client.put(f"/api/blogs/{uuid4()}", json={"likes": 1})
        assert response.status_code == status.HTTP_404_NOT_FOUND

    @pytest.mark.parametrize(("field", "value"), [("likes", 2**31), ("title", "t" * 256)])
    async def test_values_beyond_column_limits(
        self,
        client: AsyncClient,
        root_headers: dict[str, str],
        blog_payload: dict[str, Any],
        field: str,
        value: object,
    ) -> None:
        created = (await client.post("/api/blogs", json=blog_payload, headers=root_headers)).json()

        response = await client.put(f"/api/blogs/{created['id']}", json={field: value})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert (await client.get(f"/api/blogs/{created['id']}")).json() == created

    async def test_response_does_not_reread_blog(
        self,
        client: AsyncClient,
        root_headers: dict[str, str],
        blog_payload: dict[str, Any],
    ) -> None:
        created = (await client.post("/api/blogs", json=blog_payload, headers=root_headers)).json()

        with patch.object(BlogRepository, "get_or_raise", side_effect=AssertionError("blog re-read")):
            response = await client.put(f"/api/blogs/{created['id']}", json={"likes": 9})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["user"]["username"] == "root"


class TestDeleteBlog:
    """Tests for DELETE /api/blogs/{id}."""

    async def test_owner_deletes(
        self,
        client: AsyncClient,
        root_headers: dict[str, str],
        blog_payload: dict[str, Any],
    ) -> None:
        created = (await client.post("/api/blogs", json=blog_payload, headers=root_headers)).json()

        response = await client.delete(f"/api/blogs/{created['id']}", headers=root_headers)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert (await client.get("/api/blogs")).json() == []
        users = (await client.get("/api/users")).json()
        assert users[0]["blogs"] == []

    async def test_other_user_forbidden(
        self,
        client: AsyncClient,
        root_headers: dict[str, str],
        miguel_headers: dict[str, str],
        blog_payload: dict[str, Any],
    ) -> None:
        created = (await client.post("/api/blogs", json=blog_payload, headers=root_headers)).json()

        response = await client.delete(f"/api/blogs/{created['id']}", headers=miguel_headers)

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert "forbidden" in response.json()["detail"]
        assert len((await client.get("/api/blogs")).json()) == 1

    async def test_absent_blog(self, client: AsyncClient, root_headers: dict[str, str]) -> None:
        response = await client.delete(f"/api/blogs/{uuid4()}", headers=root_headers)
        assert response.status_code == status.HTTP_204_NO_CONTENT

    async def test_repeat_delete(
        self,
        client: AsyncClient,
        root_headers: dict[str, str],
        blog_payload: dict[str, Any],
    ) -> None:
        created = (await client.post("/api/blogs", json=blog_payload, headers=root_headers)).json()

        first = await client.delete(f"/api/blogs/{created['id']}", headers=root_headers)
        second = await client.delete(f"/api/blogs/{created['id']}", headers=root_headers)

        assert first.status_code == second.status_code == status.HTTP_204_NO_CONTENT

    async def test_without_token(
        self,
        client: AsyncClient,
        root_headers: dict[str, str],
        blog_payload: dict[str, Any],
    ) -> None:
        created = (await client.post("/api/blogs", json=blog_payload, headers=root_headers)).json()

        response = await client.delete(f"/api/blogs/{created['id']}")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestOwnershipScenario:
    async def test_root_blog_survives_miguel(self, client: AsyncClient, create_user: Any, login_as: Any) -> None:
        await create_user("root", "Superuser", "salainen")
        await create_user("miguel", "Miguel", "sekret")
        root_headers = await login_as("root", "salainen")
        miguel_headers = await login_as("miguel", "sekret")

        created = await client.post(
            "/api/blogs",
            json={"title": "Type wars", "author": "Robert C. Martin", "url": "http://blog.cleancoder.com/"},
            headers=root_headers,
        )
        assert created.status_code == status.HTTP_201_CREATED

        blogs = (await client.get("/api/blogs")).json()
        assert len(blogs) == 1
        assert blogs[0]["likes"] == 0
        assert blogs[0]["user"]["username"] == "root"

        forbidden = await client.delete(f"/api/blogs/{blogs[0]['id']}", headers=miguel_headers)
        assert forbidden.status_code == status.HTTP_403_FORBIDDEN
        assert [blog["id"] for blog in (await client.get("/api/blogs")).json()] == [blogs[0]["id"]]

        deleted = await client.delete(f"/api/blogs/{blogs[0]['id']}", headers=root_headers)
        assert deleted.status_code == status.HTTP_204_NO_CONTENT
        assert (await client.get("/api/blogs")).json() == []
