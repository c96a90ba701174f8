"""
Login Routes.

Exchanges a username and password for a bearer token.
"""

from fastapi import APIRouter
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_200_OK

from bloglist.dependencies import AuthServiceDep
from bloglist.schemas import LoginRequest, Token

router = APIRouter(prefix="/api/login", tags=["🔐 Authentication"])


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=Token,
    status_code=HTTP_200_OK,
    summary="Login for access token",
    description="Authenticate user with username and password to obtain a bearer token.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                        "username": "mluukkai",
                        "name": "Matti Luukkainen",
                    },
                },
            },
        },
        401: {
            "description": "Unauthorized",
            "content": {
                "application/json": {"example": {"error": "invalid username or password"}},
            },
        },
    },
    operation_id="login",
)
async def login(credentials: LoginRequest, auth_service: AuthServiceDep) -> Token:
    """
    Login with username and password.

    Parameters
    ----------
    credentials : LoginRequest
        Username and password.
    auth_service : AuthService
        Authentication service dependency.

    Returns
    -------
    Token
        Bearer token with the user's username and name.

    Raises
    ------
    InvalidCredentialsError
        If authentication fails.
    """
    user = await auth_service.authenticate_user(
        credentials.username,
        credentials.password.get_secret_value(),
    )
    return auth_service.create_token_for_user(user)
