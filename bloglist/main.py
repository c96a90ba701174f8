"""Bloglist Backend - blog list REST API built on FastAPI and SQLModel."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse

from bloglist.configs import settings
from bloglist.db import Database
from bloglist.errors import (
    DatabaseError,
    PasswordHashingError,
    PostValidationError,
    UserAuthenticationError,
    auth_exception_handler,
    database_exception_handler,
    password_hashing_exception_handler,
    post_validation_exception_handler,
    validation_exception_handler,
)
from bloglist.middleware import (
    LoggingMiddleware,
    SecurityHeadersMiddleware,
    configure_cors,
    lifespan,
)
from bloglist.routes import blog_router, login_router, user_router
from bloglist.schemas import HealthCheckResponse
from bloglist.utils.helpers import today_str

app = FastAPI(
    title=settings.APP_NAME,
    description="Blog list API: share links to blogs, like them, and manage your own",
    version=settings.VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan,
    swagger_ui_parameters={
        "docExpansion": "none",
        "operationsSorter": "method",
    },
)

configure_cors(app)

app.add_middleware(LoggingMiddleware)
app.add_middleware(SecurityHeadersMiddleware)


routes = [
    blog_router,
    user_router,
    login_router,
]

_ = [app.include_router(router) for router in routes]

errors = [
    (PostValidationError, post_validation_exception_handler),
    (UserAuthenticationError, auth_exception_handler),
    (PasswordHashingError, password_hashing_exception_handler),
    (DatabaseError, database_exception_handler),
    (RequestValidationError, validation_exception_handler),
]

_ = [app.add_exception_handler(exc_type, handler) for exc_type, handler in errors]


@app.get(
    "/health",
    tags=["🩺 Health"],
    summary="Health check endpoint",
    response_model=HealthCheckResponse,
    response_class=ORJSONResponse,
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "version": "1.0.0",
                        "status": "ok",
                        "timestamp": "2025-01-01 12:00:00",
                        "database": "connected",
                    },
                },
            },
        },
    },
    operation_id="health_check",
)
async def health_check(request: Request) -> HealthCheckResponse:
    """
    Health check endpoint reporting database reachability.

    Parameters
    ----------
    request : Request
        Current request context.

    Returns
    -------
    HealthCheckResponse
        Health status with the state of the database handle.

    Examples
    --------
    Request
        GET /health
    Response
        200 OK
        {"version": "1.0.0", "status": "ok", "timestamp": "2025-01-01 12:00:00", "database": "connected"}
    """
    database: Database | None = getattr(request.app.state, "database", None)
    connected = database is not None and database.is_open and await database.ping()

    return HealthCheckResponse(
        version=app.version,
        status="ok" if connected else "degraded",
        timestamp=today_str(),
        database="connected" if connected else "unavailable",
    )
