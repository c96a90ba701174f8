from bloglist.errors.auth import (
    AuthorizationError,
    InvalidCredentialsError,
    TokenInvalidError,
    UserAuthenticationError,
    auth_exception_handler,
)
from bloglist.errors.base import BaseAppError, create_exception_handler
from bloglist.errors.database import (
    CastError,
    DatabaseConnectionError,
    DatabaseError,
    DatabaseNotOpenError,
    DuplicateEntryError,
    RecordNotFoundError,
    database_exception_handler,
)
from bloglist.errors.password_hasher import (
    PasswordHashingError,
    password_hashing_exception_handler,
)
from bloglist.errors.validation import (
    PostValidationError,
    post_validation_exception_handler,
    validation_exception_handler,
)

__all__ = [
    "AuthorizationError",
    "BaseAppError",
    "CastError",
    "DatabaseConnectionError",
    "DatabaseError",
    "DatabaseNotOpenError",
    "DuplicateEntryError",
    "InvalidCredentialsError",
    "PasswordHashingError",
    "PostValidationError",
    "RecordNotFoundError",
    "TokenInvalidError",
    "UserAuthenticationError",
    "auth_exception_handler",
    "create_exception_handler",
    "database_exception_handler",
    "password_hashing_exception_handler",
    "post_validation_exception_handler",
    "validation_exception_handler",
]
