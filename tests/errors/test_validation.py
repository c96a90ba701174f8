# tests/errors/test_validation.py
"""Tests for bloglist/errors/validation.py module."""

from unittest.mock import MagicMock

import orjson
import pytest
from fastapi.exceptions import RequestValidationError

from bloglist.errors import (
    PostValidationError,
    post_validation_exception_handler,
    validation_exception_handler,
)


@pytest.fixture
def request_mock() -> MagicMock:
    request = MagicMock()
    request.client.host = "127.0.0.1"
    request.url.path = "/api/users"
    return request


class TestPostValidationHandler:
    """Tests for the handler used when a blog lacks title or url."""

    @pytest.mark.asyncio
    async def test_returns_empty_400(self, request_mock: MagicMock) -> None:
        response = await post_validation_exception_handler(request_mock, PostValidationError())

        assert response.status_code == 400
        assert response.body == b""


class TestValidationExceptionHandler:
    """Tests for the request validation handler."""

    @pytest.mark.asyncio
    async def test_formats_errors(self, request_mock: MagicMock) -> None:
        exc = RequestValidationError(
            [
                {
                    "loc": ("body", "username"),
                    "msg": "String should have at least 3 characters",
                    "type": "string_too_short",
                    "ctx": {"min_length": 3},
                },
            ],
        )

        response = await validation_exception_handler(request_mock, exc)

        assert response.status_code == 400
        assert orjson.loads(response.body) == {
            "error": "Validation failed",
            "errors": [
                {
                    "field": "username",
                    "message": "String should have at least 3 characters",
                    "type": "string_too_short",
                    "context": {"min_length": 3},
                },
            ],
        }

    @pytest.mark.asyncio
    async def test_stringifies_exception_context(self, request_mock: MagicMock) -> None:
        exc = RequestValidationError(
            [
                {
                    "loc": ("body", "title"),
                    "msg": "Value error, must not be empty",
                    "type": "value_error",
                    "ctx": {"error": ValueError("must not be empty")},
                },
            ],
        )

        response = await validation_exception_handler(request_mock, exc)

        body = orjson.loads(response.body)
        assert body["errors"][0]["context"] == {"error": "must not be empty"}
