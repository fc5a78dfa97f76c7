"""Error types raised by the response pipeline."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .api_errors import ApiError


class ResponseError(Exception):
    """Base exception for a response that could not be turned into a value."""

    def __init__(
        self,
        message: str,
        *,
        http_status: int | None = None,
        cause: str | None = None,
    ) -> None:
        super().__init__(message)
        self.http_status = http_status
        self.cause = cause


class ParseResponseError(ResponseError):
    """Body could not be read, was not JSON, or did not match the target shape."""


class ApiResponseError(ResponseError):
    """Server reported a failure with a well-formed error body."""

    def __init__(
        self,
        error: "ApiError",
        *,
        http_status: int | None = None,
    ) -> None:
        super().__init__(
            f"API error: {error!r}",
            http_status=http_status,
            cause="api",
        )
        self.error = error


class BodyConsumedError(RuntimeError):
    """Raised when a single-use body or response state is used twice."""


def with_http_status(exc: ResponseError, http_status: int) -> ResponseError:
    if exc.http_status is None:
        exc.http_status = http_status
    return exc


__all__ = [
    "ResponseError",
    "ParseResponseError",
    "ApiResponseError",
    "BodyConsumedError",
    "with_http_status",
]
