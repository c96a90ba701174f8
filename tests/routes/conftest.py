# tests/routes/conftest.py
"""Pytest fixtures for route tests."""

from collections.abc import AsyncGenerator, Awaitable, Callable
from datetime import timedelta

import pytest
from httpx import ASGITransport, AsyncClient

from bloglist.db import Database
from bloglist.main import app
from bloglist.managers.token_manager import create_access_token
from bloglist.models import BlogDB, UserDB
from bloglist.repositories import BlogRepository, UserRepository
from bloglist.schemas import BlogCreate, UserCreate


async def _create_user(database: Database, username: str) -> UserDB:
    async with database.transaction() as session:
        return await UserRepository(session).create(
            UserCreate(username=username, name=username.title(), password="sekret"),
        )


def _auth_headers(user: UserDB) -> dict[str, str]:
    token = create_access_token(
        user_id=user.id,
        username=user.username,
        expires_delta=timedelta(minutes=30),
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def client(database: Database) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client bound to the per-test database."""
    app.state.database = database
    async with AsyncClient(
        base_url="http://test",
        transport=ASGITransport(app=app),
    ) as ac:
        yield ac
    app.state.database = None


@pytest.fixture
async def root_user(database: Database) -> UserDB:
    """Create the user that owns the initial blogs."""
    return await _create_user(database, "root")


@pytest.fixture
async def other_user(database: Database) -> UserDB:
    """Create a second user that owns nothing."""
    return await _create_user(database, "hellas")


@pytest.fixture
def auth_headers(root_user: UserDB) -> dict[str, str]:
    """Create auth headers for the owner of the initial blogs."""
    return _auth_headers(root_user)


@pytest.fixture
def other_auth_headers(other_user: UserDB) -> dict[str, str]:
    """Create auth headers for the user that owns nothing."""
    return _auth_headers(other_user)


@pytest.fixture
def initial_blog_data() -> list[dict[str, str | int]]:
    """Bodies of the blogs stored before each test."""
    return [
        {
            "title": "React patterns",
            "author": "Michael Chan",
            "url": "https://reactpatterns.com/",
            "likes": 7,
        },
        {
            "title": "Go To Statement Considered Harmful",
            "author": "Edsger W. Dijkstra",
            "url": "http://www.u.arizona.edu/~rubinson/copyright_violations/Go_To_Considered_Harmful.html",
            "likes": 5,
        },
    ]


@pytest.fixture
async def initial_blogs(
    database: Database,
    root_user: UserDB,
    initial_blog_data: list[dict[str, str | int]],
) -> list[BlogDB]:
    """Store the initial blogs, all owned by ``root_user``."""
    async with database.transaction() as session:
        repo = BlogRepository(session)
        return [await repo.create(BlogCreate(**blog), root_user) for blog in initial_blog_data]


@pytest.fixture
def blogs_in_db(database: Database) -> Callable[[], Awaitable[list[BlogDB]]]:
    """Return a coroutine function listing every stored blog."""

    async def _blogs_in_db() -> list[BlogDB]:
        async with database.transaction() as session:
            return await BlogRepository(session).get_all()

    return _blogs_in_db
