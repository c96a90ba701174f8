"""Authentication errors."""

from starlette.status import HTTP_401_UNAUTHORIZED

from bloglist.configs import TOKEN_INVALID_MESSAGE, USER_NOT_AUTHORIZED_MESSAGE
from bloglist.errors.base import BaseAppError, create_exception_handler
from bloglist.monitoring import get_logger

logger = get_logger(__name__)


class UserAuthenticationError(BaseAppError):
    """Base class for authentication errors."""

    def __init__(
        self,
        detail: str = "Authentication failed",
        status_code: int = HTTP_401_UNAUTHORIZED,
    ) -> None:
        super().__init__(detail, status_code)


class TokenInvalidError(UserAuthenticationError):
    """Raised when a bearer token is missing or cannot be resolved to a user."""

    def __init__(self) -> None:
        super().__init__(TOKEN_INVALID_MESSAGE, HTTP_401_UNAUTHORIZED)


class AuthorizationError(UserAuthenticationError):
    """Raised when the caller does not own the record being changed."""

    def __init__(self) -> None:
        super().__init__(USER_NOT_AUTHORIZED_MESSAGE, HTTP_401_UNAUTHORIZED)


class InvalidCredentialsError(UserAuthenticationError):
    """Raised when credentials are invalid."""

    def __init__(self) -> None:
        super().__init__("invalid username or password", HTTP_401_UNAUTHORIZED)


auth_exception_handler = create_exception_handler(logger)
