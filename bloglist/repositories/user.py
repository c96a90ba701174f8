"""User repository for database operations."""

from typing import cast

from sqlalchemy import select
from sqlalchemy.orm import selectinload
from sqlalchemy.sql.expression import ColumnElement

from bloglist.errors.database import DuplicateEntryError
from bloglist.managers.password_manager import hash_password
from bloglist.models.user import UserDB
from bloglist.repositories.base import BaseRepository
from bloglist.schemas.user import UserCreate


class UserRepository(BaseRepository[UserDB]):
    """
    Repository for User database operations.

    This class implements the repository pattern for User entities,
    providing registration, lookup and listing.
    """

    model = UserDB

    async def create(self, user: UserCreate) -> UserDB:
        """
        Create a new user in the database.

        Args:
            user: User schema with user data

        Returns:
            UserDB: Created user database model

        Raises:
            DuplicateEntryError: If username already exists
            DatabaseError: For other database errors
        """
        password_hash = await hash_password(user.password.get_secret_value())

        db_user = UserDB(
            username=user.username,
            name=user.name,
            password_hash=password_hash,
        )

        try:
            return await self._save(db_user, "blogs")
        except DuplicateEntryError as e:
            raise DuplicateEntryError(detail="expected `username` to be unique") from e

    async def get_by_username(self, username: str) -> UserDB | None:
        """
        Get user by username.

        Args:
            username: Username to search for

        Returns:
            UserDB | None: User if found, None otherwise
        """
        result = await self.session.execute(
            select(UserDB).where(cast(ColumnElement[bool], UserDB.username == username)),
        )
        return result.scalar_one_or_none()

    async def get_all(self) -> list[UserDB]:  # type: ignore[override]
        """
        Get all users with their blogs.

        Returns:
            list[UserDB]: List of users
        """
        # pyrefly: ignore [bad-argument-type]
        return await super().get_all(selectinload(UserDB.blogs))
