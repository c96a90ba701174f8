"""
Middleware components for the Bloglist backend.

This module contains middleware for security headers, request logging and
CORS handling. It also contains the lifespan event handler that opens the
database handle on startup and closes it on shutdown.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from time import perf_counter
from uuid import uuid4

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import make_url
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from bloglist.configs import settings
from bloglist.db import Database
from bloglist.monitoring import bind_request_id, clear_context, configure_logging, get_logger
from bloglist.utils.helpers import get_summary, host, time_taken

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Manage application startup and shutdown events."""
    # Startup
    configure_logging()
    started = perf_counter()
    logger.info(f"Starting {app.title} ({settings.ENVIRONMENT})...")

    database = Database(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
    try:
        await database.open()
    except Exception:
        logger.exception("Failed to initialize services")
        raise

    app.state.database = database
    logger.info("Services initialized successfully")
    logger.info(f"  - Database: {make_url(settings.DATABASE_URL).get_backend_name()}")
    logger.info(f"  - API: http://{settings.HOST}:{settings.PORT}/api/blogs")
    logger.info(f"  - Health Check: http://{settings.HOST}:{settings.PORT}/health")

    yield

    # Shutdown
    logger.info(f"Shutting down {app.title} after {time_taken(started)}...")
    try:
        await database.close()
        logger.info("Services cleaned up successfully")
    except Exception:
        logger.exception("Error during service cleanup")
    finally:
        app.state.database = None


def configure_cors(app: FastAPI) -> None:
    """Configure CORS middleware for the application."""
    allowed_origins = settings.ALLOWED_ORIGINS

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        # Browsers refuse credentialed requests to a wildcard origin
        allow_credentials="*" not in allowed_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )


class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Log request summary and timing information."""

        request_id = request.headers.get("X-Request-ID") or uuid4().hex
        clear_context()
        bind_request_id(request_id)

        start_time = perf_counter()
        summary = get_summary(request)

        route_info = summary or f"{request.method} {request.url.path}"
        logger.info(f"Request: {route_info}, from ip: {host(request)}")

        response = await call_next(request)
        duration = perf_counter() - start_time

        logger.info(
            f"Response: {response.status_code} for {request.method} {request.url.path} "
            f"in {duration:.2f}s",
        )

        response.headers["X-Request-ID"] = request_id
        return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Add security headers to all responses."""

        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["X-XSS-Protection"] = "1; mode=block"
        response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        return response
