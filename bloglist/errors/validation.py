"""Custom validation error handling for FastAPI."""

from typing import cast

from fastapi import Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_400_BAD_REQUEST

from bloglist.errors.base import BaseAppError
from bloglist.monitoring import get_logger
from bloglist.utils.helpers import host

logger = get_logger(__name__)


class PostValidationError(BaseAppError):
    """Raised when a blog is submitted without a title or url."""

    def __init__(self, detail: str = "title and url are required") -> None:
        super().__init__(detail=detail, status_code=HTTP_400_BAD_REQUEST)


async def post_validation_exception_handler(request: Request, exc: Exception) -> Response:
    """Reject an incomplete blog with an empty 400 response."""
    logger.warning(f"{exc} for ip: {host(request)} at endpoint {request.url.path}")
    return Response(status_code=HTTP_400_BAD_REQUEST)


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """
    Handle Pydantic validation errors with cleaner response format.

    Args:
        request: The incoming request.
        exc: The RequestValidationError exception.

    Returns:
        ORJSONResponse with formatted validation errors.
    """
    exec_error = cast(RequestValidationError, exc)

    formatted_errors = []
    for error in exec_error.errors():
        formatted_error = {
            "field": ".".join(str(loc) for loc in error.get("loc", [])[1:]),  # Skip 'body'
            "message": error.get("msg", "Invalid value"),
            "type": error.get("type", "validation_error"),
        }
        # Convert non-serializable values (like ValueError) to strings
        if "ctx" in error:
            formatted_error["context"] = {
                key: str(value) if isinstance(value, Exception) else value
                for key, value in error["ctx"].items()
            }
        formatted_errors.append(formatted_error)

    logger.warning(
        f"Validation error for ip: {host(request)} at endpoint {request.url.path}: {formatted_errors}",
    )

    return ORJSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={
            "error": "Validation failed",
            "errors": formatted_errors,
        },
    )
