"""
User schemas for registration and listing.

The password only ever travels inbound; responses expose the public fields
and the user's blogs.
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from bloglist.configs.settings import MIN_PASSWORD_LENGTH, MIN_USERNAME_LENGTH


class UserCreate(BaseModel):
    """User creation model (for request body - excludes auto-generated fields)."""

    model_config = ConfigDict(frozen=True)

    username: str = Field(
        ...,
        min_length=MIN_USERNAME_LENGTH,
        max_length=50,
        description="Username",
        examples=["mluukkai"],
    )
    name: str | None = Field(
        default=None,
        max_length=100,
        description="Display name",
        examples=["Matti Luukkainen"],
    )
    password: SecretStr = Field(
        ...,
        min_length=MIN_PASSWORD_LENGTH,
        description="Password",
        examples=["salainen"],
    )


class UserBlogResponse(BaseModel):
    """Blog summary embedded in user responses."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    author: str | None = None
    url: str
    likes: int


class UserResponse(BaseModel):
    """User response model (safe for API responses, without sensitive data)."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    name: str | None = None
    blogs: list[UserBlogResponse] = []
