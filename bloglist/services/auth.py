"""Authentication service for username and password login."""

from datetime import timedelta

from bloglist.configs import settings
from bloglist.errors.auth import InvalidCredentialsError
from bloglist.managers.password_manager import verify_password
from bloglist.managers.token_manager import create_access_token
from bloglist.models import UserDB
from bloglist.monitoring import get_logger
from bloglist.repositories import UserRepository
from bloglist.schemas.auth import Token

logger = get_logger(__name__)


class AuthService:
    """Service for handling user authentication."""

    def __init__(self, user_repo: UserRepository) -> None:
        """
        Initialize the auth service.

        Args:
            user_repo: User repository for database operations
        """
        self.user_repo = user_repo

    async def authenticate_user(self, username: str, password: str | None) -> UserDB:
        """
        Authenticate a user by username and password.

        An unknown username still runs a password verification against a
        dummy hash so both failure paths take comparable time.

        Args:
            username: User username
            password: User password

        Returns:
            UserDB: Authenticated user

        Raises:
            InvalidCredentialsError: If authentication fails
        """
        user = await self.user_repo.get_by_username(username)
        password_hash = user.password_hash if user else None

        verified = await verify_password(password or "", password_hash)
        if user is None or not verified:
            logger.info(f"Failed login attempt for {username}")
            raise InvalidCredentialsError

        return user

    def create_token_for_user(self, user: UserDB) -> Token:
        """
        Create an access token for a user.

        Args:
            user: User entity

        Returns:
            Token: Token with the user's public identity
        """
        access_token = create_access_token(
            user_id=user.id,
            username=user.username,
            expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
        )

        return Token(token=access_token, username=user.username, name=user.name)
