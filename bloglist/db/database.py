"""Database engine and session management."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from types import TracebackType
from typing import Any, Self

from fastapi import Request
from sqlalchemy import event, text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession as SQLModelAsyncSession

from bloglist.errors.base import BaseAppError
from bloglist.errors.database import DatabaseNotOpenError
from bloglist.monitoring import get_logger

logger = get_logger(__name__)


def _engine_kwargs(url: str) -> dict[str, Any]:
    """Driver-specific engine options for ``url``."""
    parsed = make_url(url)
    if parsed.get_backend_name() != "sqlite":
        return {"pool_pre_ping": True}

    kwargs: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
    # In-memory databases live as long as their connection, so share one
    if parsed.database in (None, "", ":memory:"):
        kwargs["poolclass"] = StaticPool
    return kwargs


def _configure_engine_events(engine: AsyncEngine) -> None:
    """Configure connection pool events for monitoring."""

    @event.listens_for(engine.sync_engine, "connect")
    def on_connect(dbapi_connection: object, connection_record: object) -> None:
        logger.debug("New database connection established")

    @event.listens_for(engine.sync_engine, "checkin")
    def on_checkin(dbapi_connection: object, connection_record: object) -> None:
        logger.debug("Connection returned to pool")


class Database:
    """
    Explicitly opened handle on the database.

    The handle owns the async engine and its session factory. It is created
    once by the application lifespan, stored on ``app.state.database`` and
    closed on shutdown; route handlers reach it only through ``get_session``.

    Example:
        ```python
        async with Database("sqlite+aiosqlite://") as database:
            async with database.transaction() as session:
                session.add(BlogDB(title="React patterns", url="https://reactpatterns.com/"))
        ```
    """

    def __init__(self, url: str, *, echo: bool = False) -> None:
        self.url = url
        self.echo = echo
        self._engine: AsyncEngine | None = None
        self._session_maker: async_sessionmaker[SQLModelAsyncSession] | None = None

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise DatabaseNotOpenError
        return self._engine

    async def open(self) -> None:
        """
        Create the engine and make sure every table exists.

        Calling ``open`` on an already open handle is a no-op.
        """
        if self._engine is not None:
            return

        engine = create_async_engine(self.url, echo=self.echo, **_engine_kwargs(self.url))
        if self.echo:
            _configure_engine_events(engine)

        async with engine.begin() as conn:
            # Import all models to ensure they are registered
            from bloglist.models import BlogDB, UserDB  # noqa: F401, PLC0415

            await conn.run_sync(SQLModel.metadata.create_all)

        self._engine = engine
        self._session_maker = async_sessionmaker(
            engine,
            class_=SQLModelAsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )
        logger.info(f"Database opened: {make_url(self.url).render_as_string(hide_password=True)}")

    async def close(self) -> None:
        """Dispose of every pooled connection."""
        if self._engine is None:
            return

        await self._engine.dispose()
        self._engine = None
        self._session_maker = None
        logger.info("Database connections closed")

    async def ping(self) -> bool:
        """Return True when the store answers a trivial query."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except Exception:
            logger.exception("Database ping failed")
            return False
        return True

    @asynccontextmanager
    async def transaction(self) -> AsyncGenerator[AsyncSession]:
        """
        Context manager for explicit transaction management.

        Commits on successful exit, rolls back on exception.

        Yields:
            AsyncSession: Database session within a transaction
        """
        if self._session_maker is None:
            raise DatabaseNotOpenError

        async with self._session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                await session.rollback()
                if not isinstance(e, BaseAppError):
                    logger.exception("Transaction error")
                raise

    async def __aenter__(self) -> Self:
        await self.open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()


def get_database(request: Request) -> Database:
    """Return the store handle opened by the application lifespan."""
    database: Database | None = getattr(request.app.state, "database", None)
    if database is None:
        raise DatabaseNotOpenError
    return database


async def get_session(request: Request) -> AsyncGenerator[AsyncSession]:
    """
    Dependency for getting async database sessions.

    Yields:
        AsyncSession: Database session bound to the application's store handle
    """
    async with get_database(request).transaction() as session:
        yield session
