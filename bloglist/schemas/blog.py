"""
Blog schemas for the Bloglist application.

Request bodies are validated here before they reach a route handler; the
response models define what a blog looks like on the wire, including the
owner's public fields.
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bloglist.configs.settings import MAX_LIKES, MAX_TITLE_LENGTH, MAX_URL_LENGTH


class BlogUserResponse(BaseModel):
    """Owner information embedded in blog responses (without sensitive data)."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    name: str | None = None


class BlogCreate(BaseModel):
    """
    Blog creation body.

    ``title`` and ``url`` are typed as optional so that a body missing them
    reaches the route, which rejects it with an empty 400 response.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Canonical string reduction",
                "author": "Edsger W. Dijkstra",
                "url": "http://www.cs.utexas.edu/~EWD/transcriptions/EWD08xx/EWD808.html",
                "likes": 12,
            },
        },
    )

    title: str | None = Field(default=None, max_length=MAX_TITLE_LENGTH, description="Blog title")
    author: str | None = Field(default=None, max_length=200, description="Blog author")
    url: str | None = Field(default=None, max_length=MAX_URL_LENGTH, description="Blog URL")
    likes: int | None = Field(
        default=None,
        ge=0,
        le=MAX_LIKES,
        description="Initial like count",
    )

    @property
    def is_complete(self) -> bool:
        """Whether both title and url are present and non-empty."""
        return bool(self.title and self.title.strip() and self.url and self.url.strip())


class BlogUpdate(BaseModel):
    """Blog update body (all fields optional)."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"likes": 13},
        },
    )

    title: str | None = Field(default=None, max_length=MAX_TITLE_LENGTH)
    author: str | None = Field(default=None, max_length=200)
    url: str | None = Field(default=None, max_length=MAX_URL_LENGTH)
    likes: int | None = Field(default=None, ge=0, le=MAX_LIKES)

    @field_validator("title", "url", "likes", mode="after")
    @classmethod
    def validate_not_blank(cls, v: str | int | None) -> str | int | None:
        """A title, url or likes sent explicitly must hold a value; text must not be blank."""
        if v is None:
            mssg = "must not be null"
            raise ValueError(mssg)
        if isinstance(v, str) and not v.strip():
            mssg = "must not be empty"
            raise ValueError(mssg)
        return v


class BlogResponse(BaseModel):
    """Blog response model with the owner's public fields denormalized."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    author: str | None = None
    url: str
    likes: int
    user: BlogUserResponse | None = None
