"""Response body sources and the buffering protocol.

A body comes either from a single-pass reader (:class:`ReadBody`) or from
bytes already in memory (:class:`SliceBody`). Both can be buffered into a
JSON value plus a :class:`SliceBody` that supports any number of further
decodes, so classification can peek at the body without losing it.
"""

from __future__ import annotations

import json
import logging
from typing import Protocol, TypeVar

from ..config import DEFAULT_READ_CHUNK_SIZE
from .api_errors import ApiError, parse_api_error
from .errors import BodyConsumedError, ParseResponseError

logger = logging.getLogger("elastic_responses")

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)

BytesLike = bytes | bytearray | memoryview


class Reader(Protocol):
    def read(self, size: int = -1, /) -> bytes: ...


class FromJson(Protocol[T_co]):
    @classmethod
    def from_json(cls, value: object) -> T_co: ...


class ResponseBody(Protocol):
    """A body that can be buffered to JSON and decoded as success or error."""

    def buffer(self) -> tuple[object, "SliceBody"]: ...

    def parse_ok(self, response_type: type[FromJson[T]]) -> T: ...

    def parse_err(self) -> ApiError: ...


def read_to_end(
    reader: Reader,
    *,
    chunk_size: int = DEFAULT_READ_CHUNK_SIZE,
    max_bytes: int | None = None,
) -> bytes:
    buf = bytearray()
    while True:
        try:
            chunk = reader.read(chunk_size)
        except OSError as exc:
            raise ParseResponseError("failed to read response body", cause="io") from exc
        if not chunk:
            break
        buf += chunk
        if max_bytes is not None and len(buf) > max_bytes:
            raise ParseResponseError(
                f"response body exceeds {max_bytes} bytes",
                cause="body_too_large",
            )
    return bytes(buf)


def _reject_constant(name: str) -> object:
    raise ValueError(f"{name} is not valid JSON")


def decode_json(data: bytes | bytearray) -> object:
    try:
        return json.loads(data, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        raise ParseResponseError("response body is not valid JSON", cause="json") from exc


def decode_ok(value: object, response_type: type[FromJson[T]]) -> T:
    try:
        return response_type.from_json(value)
    except (TypeError, ValueError, KeyError) as exc:
        name = getattr(response_type, "__name__", repr(response_type))
        raise ParseResponseError(
            f"response body does not match {name}",
            cause="shape",
        ) from exc


class SliceBody:
    """In-memory body; may be buffered and decoded any number of times."""

    __slots__ = ("_data",)

    def __init__(self, data: BytesLike) -> None:
        if isinstance(data, memoryview):
            data = data.tobytes()
        if not isinstance(data, (bytes, bytearray)):
            raise TypeError("body must be bytes, bytearray or memoryview")
        self._data = data

    @property
    def data(self) -> bytes | bytearray:
        return self._data

    def buffer(self) -> tuple[object, "SliceBody"]:
        return decode_json(self._data), self

    def parse_ok(self, response_type: type[FromJson[T]]) -> T:
        return decode_ok(decode_json(self._data), response_type)

    def parse_err(self) -> ApiError:
        return parse_api_error(decode_json(self._data))


class ReadBody:
    """Single-pass body backed by a reader.

    The reader is detached on first use. Buffering is the only way to look
    at the body and still decode it afterwards.
    """

    __slots__ = ("_reader", "_chunk_size", "_max_bytes")

    def __init__(
        self,
        reader: Reader,
        *,
        chunk_size: int = DEFAULT_READ_CHUNK_SIZE,
        max_bytes: int | None = None,
    ) -> None:
        self._reader: Reader | None = reader
        self._chunk_size = chunk_size
        self._max_bytes = max_bytes

    @property
    def consumed(self) -> bool:
        return self._reader is None

    def _read_all(self) -> bytes:
        reader = self._reader
        if reader is None:
            raise BodyConsumedError("streamed response body was already read")
        self._reader = None
        return read_to_end(
            reader,
            chunk_size=self._chunk_size,
            max_bytes=self._max_bytes,
        )

    def buffer(self) -> tuple[object, SliceBody]:
        data = self._read_all()
        logger.debug("response body buffered bytes=%s", len(data))
        return decode_json(data), SliceBody(data)

    def parse_ok(self, response_type: type[FromJson[T]]) -> T:
        return decode_ok(decode_json(self._read_all()), response_type)

    def parse_err(self) -> ApiError:
        return parse_api_error(decode_json(self._read_all()))


__all__ = [
    "BytesLike",
    "Reader",
    "FromJson",
    "ResponseBody",
    "SliceBody",
    "ReadBody",
    "read_to_end",
    "decode_json",
    "decode_ok",
]
