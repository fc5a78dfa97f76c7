"""Success/error classification of responses."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, TypeVar

from .models import ResponseHead
from .state import MaybeOkResponse, Unbuffered

T_co = TypeVar("T_co", covariant=True)

Classifier = Callable[[ResponseHead, Unbuffered], MaybeOkResponse]


class ResponseType(Protocol[T_co]):
    """A type a response can be parsed into.

    ``is_ok`` decides whether the response is a success; it may buffer the
    body to inspect it. ``from_json`` builds the value from decoded JSON.
    """

    @classmethod
    def is_ok(cls, head: ResponseHead, body: Unbuffered) -> MaybeOkResponse: ...

    @classmethod
    def from_json(cls, value: object) -> T_co: ...


def is_ok_by_status(head: ResponseHead, body: Unbuffered) -> MaybeOkResponse:
    """2xx is a success, anything else an error. The body is left unread."""

    if head.is_success():
        return MaybeOkResponse.success(body)
    return MaybeOkResponse.failure(body)


class StatusClassified:
    """Mixin giving a response type the status-code classification."""

    @classmethod
    def is_ok(cls, head: ResponseHead, body: Unbuffered) -> MaybeOkResponse:
        return is_ok_by_status(head, body)


class JsonValue(StatusClassified):
    """Response type for an arbitrary JSON document, returned as decoded."""

    @classmethod
    def from_json(cls, value: object) -> object:
        return value


__all__ = [
    "Classifier",
    "ResponseType",
    "is_ok_by_status",
    "StatusClassified",
    "JsonValue",
]
