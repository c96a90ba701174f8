from uuid import UUID

from pydantic import BaseModel, Field, SecretStr


class LoginRequest(BaseModel):
    """Credentials posted to the login endpoint."""

    username: str = Field(..., examples=["mluukkai"])
    password: SecretStr = Field(..., examples=["salainen"])


class Token(BaseModel):
    """Login response carrying the bearer token."""

    token: str
    username: str
    name: str | None = None


class TokenData(BaseModel):
    """Token data schema for extracted token payload."""

    username: str
    user_id: UUID
    jti: str
    token_type: str = "access"
