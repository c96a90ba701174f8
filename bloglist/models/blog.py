"""Blog database model using SQLModel."""

from typing import TYPE_CHECKING, Optional, cast
from uuid import UUID, uuid4

from pydantic import ConfigDict
from sqlalchemy import CheckConstraint, Integer
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, ForeignKey, Relationship, SQLModel, String

from bloglist.configs.settings import MAX_TITLE_LENGTH, MAX_URL_LENGTH

if TYPE_CHECKING:
    from bloglist.models.user import UserDB


class BlogDB(SQLModel, table=True):
    """
    Blog database model.

    A blog is a link to an article somewhere on the web, with a like counter
    and an optional owner. The owner reference is the only link between a
    blog and a user; the user's list of blogs is loaded through it.
    """

    __tablename__ = cast("declared_attr[str]", "blogs")

    __table_args__ = (CheckConstraint("likes >= 0", name="ck_blogs_likes_non_negative"),)

    # Primary key
    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="Blog ID",
    )

    # Required fields
    title: str = Field(
        sa_column=Column(String(MAX_TITLE_LENGTH), nullable=False),
        description="Blog title",
    )
    url: str = Field(
        sa_column=Column(String(MAX_URL_LENGTH), nullable=False),
        description="Blog URL",
    )

    # Optional fields
    author: str | None = Field(
        default=None,
        sa_column=Column(String(200)),
        description="Name of the blog's author",
    )
    likes: int = Field(
        default=0,
        sa_column=Column(Integer, nullable=False, default=0),
        description="Like count",
    )

    # Foreign key to User
    user_id: UUID | None = Field(
        default=None,
        sa_column=Column(
            "user_id",
            ForeignKey("users.id", ondelete="SET NULL"),
            nullable=True,
            index=True,
        ),
        description="Owner ID (foreign key to users.id)",
    )

    user: Optional["UserDB"] = Relationship(back_populates="blogs")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "title": "React patterns",
                "author": "Michael Chan",
                "url": "https://reactpatterns.com/",
                "likes": 7,
                "user_id": "123e4567-e89b-12d3-a456-426614174000",
            },
        },
    )
