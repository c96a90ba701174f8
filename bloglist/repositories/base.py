"""Base repository for database operations."""

from typing import Any
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.interfaces import LoaderOption
from sqlmodel import SQLModel

from bloglist.errors.database import (
    CastError,
    DatabaseConnectionError,
    DatabaseError,
    DuplicateEntryError,
    RecordNotFoundError,
)


def parse_record_id(record_id: str | UUID) -> UUID:
    """
    Parse a path identifier into a UUID.

    Args:
        record_id: Identifier as received from the client

    Returns:
        UUID: Parsed identifier

    Raises:
        CastError: If the identifier is not a valid UUID
    """
    if isinstance(record_id, UUID):
        return record_id
    try:
        return UUID(record_id)
    except (TypeError, ValueError) as e:
        raise CastError from e


class BaseRepository[ModelT: SQLModel]:
    """
    Base repository implementing common CRUD operations.

    This class provides a generic implementation of database operations
    that can be extended by specific entity repositories. Mutations commit
    before returning, so a record handed back to a route is already durable.

    Attributes:
        model: The SQLModel database model type.
        id_field: The name of the primary key field (default: "id").
    """

    model: type[ModelT]
    id_field: str = "id"

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    @property
    def label(self) -> str:
        return self.model.__name__.removesuffix("DB")

    async def get_by_id(self, record_id: UUID, *options: LoaderOption) -> ModelT | None:
        """
        Get a record by its ID.

        Args:
            record_id: Record UUID
            options: Loader options, e.g. ``selectinload`` for relationships

        Returns:
            ModelT | None: Record if found, None otherwise
        """
        id_column = getattr(self.model, self.id_field)
        statement = select(self.model).where(id_column == record_id).options(*options)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_or_raise(self, record_id: str | UUID, *options: LoaderOption) -> ModelT:
        """
        Get a record by ID or raise an exception if not found.

        Args:
            record_id: Record identifier, parsed into a UUID first
            options: Loader options

        Returns:
            ModelT: Record if found

        Raises:
            CastError: If the identifier is malformed
            RecordNotFoundError: If record is not found
        """
        parsed_id = parse_record_id(record_id)
        record = await self.get_by_id(parsed_id, *options)
        if not record:
            raise RecordNotFoundError(
                detail=f"{self.label} with ID {parsed_id} not found",
            )
        return record

    async def get_all(self, *options: LoaderOption) -> list[ModelT]:
        """
        Get all records.

        Returns:
            list[ModelT]: List of records
        """
        statement = select(self.model).options(*options)
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def count(self) -> int:
        """
        Count total records.

        Returns:
            int: Total number of records
        """
        statement = select(func.count()).select_from(self.model)
        result = await self.session.execute(statement)
        count = result.scalar()
        return count if count is not None else 0

    async def delete(self, record: ModelT) -> None:
        """
        Delete a record and commit.

        Args:
            record: Record to remove
        """
        try:
            await self.session.delete(record)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise DatabaseConnectionError(detail=f"Failed to delete record: {e}") from e

    async def _save(self, record: ModelT, *relationships: str) -> ModelT:
        """
        Add a record, commit, and refresh it from the database with error handling.

        Args:
            record: Record to add
            relationships: Relationship attributes to load on the refreshed record

        Returns:
            ModelT: Refreshed record

        Raises:
            DuplicateEntryError: If a unique constraint is violated
            DatabaseError: For other integrity errors
            DatabaseConnectionError: For any other database failure
        """
        try:
            self.session.add(record)
            await self.session.commit()
            await self.session.refresh(record)
            if relationships:
                await self.session.refresh(record, attribute_names=list(relationships))
        except IntegrityError as e:
            await self.session.rollback()
            error_msg = str(e.orig) if e.orig else str(e)
            if "unique" in error_msg.lower() or "duplicate" in error_msg.lower():
                raise DuplicateEntryError(detail=error_msg) from e
            raise DatabaseError(detail=f"Database integrity error: {error_msg}") from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise DatabaseConnectionError(detail=f"Failed to save record: {e}") from e
        return record

    @staticmethod
    def _changes(schema: Any) -> dict[str, Any]:  # noqa: ANN401
        """Fields explicitly provided on an update schema."""
        return schema.model_dump(exclude_unset=True)
