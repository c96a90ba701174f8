# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os

# Settings are read once at import time, so these must be set before the
# application is imported anywhere
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_TO_FILE"] = "false"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["ARGON2_MEMORY_COST"] = "1024"
os.environ["ARGON2_TIME_COST"] = "1"
os.environ["ARGON2_PARALLELISM"] = "1"

from collections.abc import AsyncGenerator  # noqa: E402

import pytest  # noqa: E402

from bloglist.db import Database  # noqa: E402


@pytest.fixture
async def database() -> AsyncGenerator[Database]:
    """Open a fresh in-memory database for a single test."""
    async with Database("sqlite+aiosqlite://") as db:
        yield db
