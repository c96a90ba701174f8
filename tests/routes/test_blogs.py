# tests/routes/test_blogs.py
"""Tests for the /api/blogs routes against an in-memory database."""

from collections.abc import Awaitable, Callable
from uuid import uuid4

import pytest
from fastapi import status
from httpx import AsyncClient

from bloglist.managers.token_manager import create_access_token
from bloglist.models import BlogDB, UserDB

BlogsInDb = Callable[[], Awaitable[list[BlogDB]]]

NEW_BLOG = {"title": "New Blog Title", "author": "New Author", "url": "www.newblog.com"}


class TestListBlogs:
    """GET /api/blogs."""

    @pytest.mark.asyncio
    async def test_blogs_are_returned_as_json(
        self,
        client: AsyncClient,
        initial_blogs: list[BlogDB],
    ) -> None:
        response = await client.get("/api/blogs")

        assert response.status_code == status.HTTP_200_OK
        assert response.headers["content-type"].startswith("application/json")
        assert len(response.json()) == len(initial_blogs)

    @pytest.mark.asyncio
    async def test_every_blog_has_an_id(
        self,
        client: AsyncClient,
        initial_blogs: list[BlogDB],
    ) -> None:
        response = await client.get("/api/blogs")

        assert all(blog["id"] for blog in response.json())

    @pytest.mark.asyncio
    async def test_owner_fields_are_denormalized(
        self,
        client: AsyncClient,
        root_user: UserDB,
        initial_blogs: list[BlogDB],
    ) -> None:
        response = await client.get("/api/blogs")

        owners = [blog["user"] for blog in response.json()]
        assert owners == [
            {"id": str(root_user.id), "username": "root", "name": "Root"},
        ] * len(initial_blogs)

    @pytest.mark.asyncio
    async def test_empty_store_returns_empty_list(self, client: AsyncClient) -> None:
        response = await client.get("/api/blogs")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []


class TestCreateBlog:
    """POST /api/blogs."""

    @pytest.mark.asyncio
    async def test_valid_blog_is_added(
        self,
        client: AsyncClient,
        blogs_in_db: BlogsInDb,
        auth_headers: dict[str, str],
        initial_blogs: list[BlogDB],
    ) -> None:
        response = await client.post("/api/blogs", json=NEW_BLOG, headers=auth_headers)

        assert response.status_code == status.HTTP_201_CREATED
        titles = [blog.title for blog in await blogs_in_db()]
        assert len(titles) == len(initial_blogs) + 1
        assert "New Blog Title" in titles

    @pytest.mark.asyncio
    async def test_likes_default_to_zero(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
    ) -> None:
        blog = {"title": "New Blog Title", "url": "www.newblog.com"}

        response = await client.post("/api/blogs", json=blog, headers=auth_headers)

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["likes"] == 0

        listed = await client.get("/api/blogs")
        assert listed.json()[0]["likes"] == 0

    @pytest.mark.asyncio
    async def test_created_blog_is_owned_by_caller(
        self,
        client: AsyncClient,
        root_user: UserDB,
        auth_headers: dict[str, str],
    ) -> None:
        response = await client.post("/api/blogs", json=NEW_BLOG, headers=auth_headers)

        assert response.json()["user"]["id"] == str(root_user.id)

        users = await client.get("/api/users")
        assert [blog["title"] for blog in users.json()[0]["blogs"]] == ["New Blog Title"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "blog",
        [
            {"author": "No Title", "url": "www.notitle.com"},
            {"title": "No Url", "author": "No Url"},
            {"title": "   ", "url": "www.blanktitle.com"},
        ],
    )
    async def test_incomplete_blog_is_rejected(
        self,
        client: AsyncClient,
        blogs_in_db: BlogsInDb,
        auth_headers: dict[str, str],
        initial_blogs: list[BlogDB],
        blog: dict[str, str],
    ) -> None:
        response = await client.post("/api/blogs", json=blog, headers=auth_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.content == b""
        assert len(await blogs_in_db()) == len(initial_blogs)

    @pytest.mark.asyncio
    async def test_missing_token_is_rejected(
        self,
        client: AsyncClient,
        blogs_in_db: BlogsInDb,
    ) -> None:
        response = await client.post("/api/blogs", json=NEW_BLOG)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json() == {"error": "token invalid"}
        assert await blogs_in_db() == []

    @pytest.mark.asyncio
    async def test_garbage_token_is_rejected(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/blogs",
            json=NEW_BLOG,
            headers={"Authorization": "Bearer not-a-jwt"},
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json() == {"error": "token invalid"}

    @pytest.mark.asyncio
    async def test_token_of_unknown_user_is_rejected(self, client: AsyncClient) -> None:
        token = create_access_token(user_id=uuid4(), username="ghost")

        response = await client.post(
            "/api/blogs",
            json=NEW_BLOG,
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    @pytest.mark.asyncio
    async def test_negative_likes_fail_validation(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
    ) -> None:
        response = await client.post(
            "/api/blogs",
            json={**NEW_BLOG, "likes": -1},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"] == "Validation failed"

    @pytest.mark.asyncio
    async def test_likes_beyond_integer_range_fail_validation(
        self,
        client: AsyncClient,
        blogs_in_db: BlogsInDb,
        auth_headers: dict[str, str],
        initial_blogs: list[BlogDB],
    ) -> None:
        response = await client.post(
            "/api/blogs",
            json={**NEW_BLOG, "likes": 10**20},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"] == "Validation failed"
        assert len(await blogs_in_db()) == len(initial_blogs)

    @pytest.mark.asyncio
    async def test_missing_body_is_rejected(
        self,
        client: AsyncClient,
        blogs_in_db: BlogsInDb,
        auth_headers: dict[str, str],
        initial_blogs: list[BlogDB],
    ) -> None:
        response = await client.post("/api/blogs", headers=auth_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.content == b""
        assert len(await blogs_in_db()) == len(initial_blogs)


class TestDeleteBlog:
    """DELETE /api/blogs/{id}."""

    @pytest.mark.asyncio
    async def test_owner_can_delete(
        self,
        client: AsyncClient,
        blogs_in_db: BlogsInDb,
        auth_headers: dict[str, str],
        initial_blogs: list[BlogDB],
    ) -> None:
        blog_to_delete = initial_blogs[0]

        response = await client.delete(f"/api/blogs/{blog_to_delete.id}", headers=auth_headers)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        remaining = await blogs_in_db()
        assert len(remaining) == len(initial_blogs) - 1
        assert blog_to_delete.title not in [blog.title for blog in remaining]

    @pytest.mark.asyncio
    async def test_deleted_blog_leaves_owner_list(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
        initial_blogs: list[BlogDB],
    ) -> None:
        await client.delete(f"/api/blogs/{initial_blogs[0].id}", headers=auth_headers)

        users = await client.get("/api/users")
        owned = [blog["id"] for blog in users.json()[0]["blogs"]]
        assert owned == [str(initial_blogs[1].id)]

    @pytest.mark.asyncio
    async def test_other_user_cannot_delete(
        self,
        client: AsyncClient,
        blogs_in_db: BlogsInDb,
        other_auth_headers: dict[str, str],
        initial_blogs: list[BlogDB],
    ) -> None:
        blog_to_delete = initial_blogs[0]

        response = await client.delete(
            f"/api/blogs/{blog_to_delete.id}",
            headers=other_auth_headers,
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json() == {"error": "user not authorized"}
        assert blog_to_delete.id in [blog.id for blog in await blogs_in_db()]

    @pytest.mark.asyncio
    async def test_delete_requires_token(
        self,
        client: AsyncClient,
        initial_blogs: list[BlogDB],
    ) -> None:
        response = await client.delete(f"/api/blogs/{initial_blogs[0].id}")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json() == {"error": "token invalid"}

    @pytest.mark.asyncio
    async def test_malformed_id(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
    ) -> None:
        response = await client.delete("/api/blogs/5a3d5da59070081a82a3445", headers=auth_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "malformatted id"}

    @pytest.mark.asyncio
    async def test_unknown_id(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
    ) -> None:
        missing_id = uuid4()

        response = await client.delete(f"/api/blogs/{missing_id}", headers=auth_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": f"Blog with ID {missing_id} not found"}


class TestUpdateBlog:
    """PUT /api/blogs/{id}."""

    @pytest.mark.asyncio
    async def test_provided_fields_are_replaced(
        self,
        client: AsyncClient,
        initial_blogs: list[BlogDB],
    ) -> None:
        blog = initial_blogs[0]

        response = await client.put(f"/api/blogs/{blog.id}", json={"likes": blog.likes + 1})

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["likes"] == blog.likes + 1
        assert body["title"] == blog.title
        assert body["user"]["username"] == "root"

    @pytest.mark.asyncio
    async def test_update_needs_no_token(
        self,
        client: AsyncClient,
        blogs_in_db: BlogsInDb,
        initial_blogs: list[BlogDB],
    ) -> None:
        blog = initial_blogs[1]

        response = await client.put(f"/api/blogs/{blog.id}", json={"title": "Renamed"})

        assert response.status_code == status.HTTP_200_OK
        stored = {b.id: b.title for b in await blogs_in_db()}
        assert stored[blog.id] == "Renamed"

    @pytest.mark.asyncio
    async def test_blank_title_fails_validation(
        self,
        client: AsyncClient,
        initial_blogs: list[BlogDB],
    ) -> None:
        response = await client.put(f"/api/blogs/{initial_blogs[0].id}", json={"title": ""})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"] == "Validation failed"

    @pytest.mark.asyncio
    async def test_null_author_is_cleared(
        self,
        client: AsyncClient,
        blogs_in_db: BlogsInDb,
        initial_blogs: list[BlogDB],
    ) -> None:
        blog = initial_blogs[0]

        response = await client.put(f"/api/blogs/{blog.id}", json={"author": None})

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["author"] is None
        assert body["title"] == blog.title
        stored = {b.id: b.author for b in await blogs_in_db()}
        assert stored[blog.id] is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("field", ["title", "url", "likes"])
    async def test_null_required_field_fails_validation(
        self,
        client: AsyncClient,
        blogs_in_db: BlogsInDb,
        initial_blogs: list[BlogDB],
        field: str,
    ) -> None:
        blog = initial_blogs[0]

        response = await client.put(f"/api/blogs/{blog.id}", json={field: None})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"] == "Validation failed"
        stored = {b.id: b for b in await blogs_in_db()}
        assert stored[blog.id].title == "React patterns"

    @pytest.mark.asyncio
    async def test_likes_beyond_integer_range_fail_validation(
        self,
        client: AsyncClient,
        initial_blogs: list[BlogDB],
    ) -> None:
        response = await client.put(
            f"/api/blogs/{initial_blogs[0].id}",
            json={"likes": 2**63},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"] == "Validation failed"

    @pytest.mark.asyncio
    async def test_malformed_id(self, client: AsyncClient) -> None:
        response = await client.put("/api/blogs/not-an-id", json={"likes": 1})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "malformatted id"}

    @pytest.mark.asyncio
    async def test_unknown_id(self, client: AsyncClient) -> None:
        response = await client.put(f"/api/blogs/{uuid4()}", json={"likes": 1})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "not found" in response.json()["error"]
