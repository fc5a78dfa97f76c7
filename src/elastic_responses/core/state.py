"""Buffered/unbuffered response state handed between classifier and decoder."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeVar

from .api_errors import ApiError
from .body import FromJson, ResponseBody, SliceBody
from .errors import BodyConsumedError

T = TypeVar("T")


class Unbuffered:
    """A body that has not been read yet.

    Every method detaches the underlying body, so an ``Unbuffered`` can be
    used exactly once: buffered, or decoded directly.
    """

    __slots__ = ("_body",)

    def __init__(self, body: ResponseBody) -> None:
        self._body: ResponseBody | None = body

    def _take(self) -> ResponseBody:
        body = self._body
        if body is None:
            raise BodyConsumedError("unbuffered response body was already used")
        self._body = None
        return body

    def buffer(self) -> tuple[object, "Buffered"]:
        """Read the body into a JSON value and a reusable buffered body."""

        value, buffered = self._take().buffer()
        return value, Buffered(buffered)

    def parse_ok(self, response_type: type[FromJson[T]]) -> T:
        return self._take().parse_ok(response_type)

    def parse_err(self) -> ApiError:
        return self._take().parse_err()


class Buffered:
    """A body already read into memory; decodes can be repeated."""

    __slots__ = ("_body",)

    def __init__(self, body: SliceBody) -> None:
        self._body = body

    @property
    def body(self) -> SliceBody:
        return self._body

    def parse_ok(self, response_type: type[FromJson[T]]) -> T:
        return self._body.parse_ok(response_type)

    def parse_err(self) -> ApiError:
        return self._body.parse_err()


MaybeBuffered = Unbuffered | Buffered


@dataclass(slots=True, frozen=True)
class MaybeOkResponse:
    """Classification outcome: success flag plus the body in its current state."""

    ok: bool
    body: MaybeBuffered

    @classmethod
    def success(cls, body: MaybeBuffered) -> "MaybeOkResponse":
        return cls(ok=True, body=body)

    @classmethod
    def failure(cls, body: MaybeBuffered) -> "MaybeOkResponse":
        return cls(ok=False, body=body)

    @property
    def buffered(self) -> bool:
        return isinstance(self.body, Buffered)


__all__ = [
    "Unbuffered",
    "Buffered",
    "MaybeBuffered",
    "MaybeOkResponse",
]
