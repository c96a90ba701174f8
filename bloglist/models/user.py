"""User database model using SQLModel."""

from typing import TYPE_CHECKING, cast
from uuid import UUID, uuid4

from pydantic import ConfigDict
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, Relationship, SQLModel, String

if TYPE_CHECKING:
    from bloglist.models.blog import BlogDB


class UserDB(SQLModel, table=True):
    """
    User database model.

    ``blogs`` is derived from ``blogs.user_id`` rather than stored on the
    user, so it always reflects the blogs that currently exist.
    """

    __tablename__ = cast("declared_attr[str]", "users")

    # Primary key
    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="User ID",
    )

    # Required fields
    username: str = Field(
        sa_column=Column(String(50), unique=True, nullable=False, index=True),
        description="Username (unique)",
    )
    password_hash: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Argon2 password hash",
    )

    # Optional profile fields
    name: str | None = Field(
        default=None,
        sa_column=Column(String(100)),
        description="Display name",
    )

    blogs: list["BlogDB"] = Relationship(back_populates="user")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "username": "mluukkai",
                "name": "Matti Luukkainen",
            },
        },
    )
