"""Application dependencies for repositories and bearer-token authentication."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.ext.asyncio import AsyncSession

from bloglist.db import get_session
from bloglist.errors import TokenInvalidError
from bloglist.managers.token_manager import decode_access_token
from bloglist.models import UserDB
from bloglist.repositories import BlogRepository, UserRepository
from bloglist.services import AuthService

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/login", auto_error=False)


def get_user_repository(session: Annotated[AsyncSession, Depends(get_session)]) -> UserRepository:
    """
    Resolve the `UserRepository` dependency.

    Parameters
    ----------
    session : AsyncSession
        Database session.

    Returns
    -------
    UserRepository
        Repository instance bound to the session.
    """
    return UserRepository(session)


def get_blog_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> BlogRepository:
    """
    Resolve the `BlogRepository` dependency.

    Parameters
    ----------
    session : AsyncSession
        Database session.

    Returns
    -------
    BlogRepository
        Repository instance bound to the session.
    """
    return BlogRepository(session)


UserRepoDep = Annotated[UserRepository, Depends(get_user_repository)]
BlogRepoDep = Annotated[BlogRepository, Depends(get_blog_repository)]


def get_auth_service(user_repo: UserRepoDep) -> AuthService:
    """Dependency to get AuthService bound to the request session."""
    return AuthService(user_repo)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]


async def get_current_user(
    token: Annotated[str | None, Depends(oauth2_scheme)],
    user_repo: UserRepoDep,
) -> UserDB:
    """
    Get current authenticated user using user_id from token claims.

    Every failure to resolve the caller is reported as the same error.

    Parameters
    ----------
    token : str | None
        Bearer token, if the Authorization header carried one.
    user_repo : UserRepository
        Repository used to look the user up.

    Returns
    -------
    UserDB
        Current authenticated user.

    Raises
    ------
    TokenInvalidError
        If the caller cannot be identified.
    """
    if not token:
        raise TokenInvalidError

    token_data = decode_access_token(token)
    if not token_data:
        raise TokenInvalidError

    user = await user_repo.get_by_id(token_data.user_id)
    if not user:
        raise TokenInvalidError

    return user


CurrentUserDep = Annotated[UserDB, Depends(get_current_user)]
