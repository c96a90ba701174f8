"""
User Routes.

Provides registration and listing of user accounts.

Summary
-------
Endpoints include:
  - Create user
  - Get all users with their blogs
"""

from typing import Annotated

from fastapi import APIRouter, Body
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_200_OK, HTTP_201_CREATED

from bloglist.dependencies import UserRepoDep
from bloglist.models import UserDB
from bloglist.monitoring import get_logger
from bloglist.schemas import UserCreate, UserResponse

router = APIRouter(prefix="/api/users", tags=["👤 Users"])

logger = get_logger(__name__)

USER_EXAMPLE = {
    "id": "123e4567-e89b-12d3-a456-426614174111",
    "username": "mluukkai",
    "name": "Matti Luukkainen",
    "blogs": [
        {
            "id": "123e4567-e89b-12d3-a456-426614174000",
            "title": "React patterns",
            "author": "Michael Chan",
            "url": "https://reactpatterns.com/",
            "likes": 7,
        },
    ],
}


def db_user_to_response(db_user: UserDB) -> UserResponse:
    """
    Convert a `UserDB` instance, with its blogs loaded, to `UserResponse`.

    Parameters
    ----------
    db_user : UserDB
        Database user entity.

    Returns
    -------
    UserResponse
        Validated response model.
    """
    return UserResponse.model_validate(db_user, from_attributes=True)


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=UserResponse,
    status_code=HTTP_201_CREATED,
    summary="Create a new user",
    description="Create a new user account with the provided information.",
    responses={
        201: {"content": {"application/json": {"example": {**USER_EXAMPLE, "blogs": []}}}},
        400: {
            "description": "Bad request",
            "content": {
                "application/json": {
                    "example": {"error": "Validation failed", "errors": []},
                },
            },
        },
        409: {
            "description": "Conflict",
            "content": {
                "application/json": {"example": {"error": "expected `username` to be unique"}},
            },
        },
    },
    operation_id="users_create",
)
async def create_user(
    user: Annotated[
        UserCreate,
        Body(
            examples=[
                {"username": "mluukkai", "name": "Matti Luukkainen", "password": "salainen"},
            ],
        ),
    ],
    repo: UserRepoDep,
) -> UserResponse:
    """
    Create a new user and return the safe response model.

    Parameters
    ----------
    user : UserCreate
        User input payload.
    repo : UserRepository
        Repository dependency.

    Returns
    -------
    UserResponse
        Created user (without password).

    Raises
    ------
    DuplicateEntryError
        If the username already exists.
    """
    db_user = await repo.create(user)
    logger.info(f"User {db_user.username} registered")
    return db_user_to_response(db_user)


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[UserResponse],
    status_code=HTTP_200_OK,
    summary="Get all users",
    description="Retrieve every user together with the blogs they own.",
    responses={
        200: {"content": {"application/json": {"example": [USER_EXAMPLE]}}},
    },
    operation_id="users_get_all",
)
async def get_users(repo: UserRepoDep) -> list[UserResponse]:
    """
    Get all users.

    Parameters
    ----------
    repo : UserRepository
        Repository dependency.

    Returns
    -------
    list[UserResponse]
        Users with their blogs.
    """
    db_users = await repo.get_all()
    return [db_user_to_response(user) for user in db_users]
