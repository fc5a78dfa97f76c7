"""Parse HTTP responses into a typed value or an API error."""

from __future__ import annotations

import logging
from typing import Generic, TypeVar

import httpx

from ..config import ParserConfig
from .body import BytesLike, ReadBody, Reader, ResponseBody, SliceBody
from .classify import Classifier, ResponseType
from .errors import ApiResponseError, ParseResponseError, with_http_status
from .httpx_body import body_from_httpx
from .models import ResponseHead
from .state import MaybeOkResponse, Unbuffered

logger = logging.getLogger("elastic_responses")

T = TypeVar("T")


class Parser(Generic[T]):
    """Parser bound to a response type, independent of the body source."""

    def __init__(
        self,
        response_type: type[ResponseType[T]],
        *,
        classifier: Classifier | None = None,
        config: ParserConfig | None = None,
    ) -> None:
        self._response_type = response_type
        self._classifier = classifier
        self._config = config or ParserConfig()
        self._config.validate()

    @property
    def config(self) -> ParserConfig:
        return self._config

    def from_bytes(self, head: ResponseHead | int, body: BytesLike) -> T:
        """Parse a body held in memory."""

        return self.from_body(head, SliceBody(body))

    def from_reader(self, head: ResponseHead | int, reader: Reader) -> T:
        """Parse a body from a single-pass reader; it is read at most once."""

        return self.from_body(
            head,
            ReadBody(
                reader,
                chunk_size=self._config.read_chunk_size,
                max_bytes=self._config.max_body_bytes,
            ),
        )

    def from_httpx(self, response: httpx.Response) -> T:
        """Parse an httpx response, streaming the body if it has not been read."""

        return self.from_body(
            response.status_code,
            body_from_httpx(response, self._config),
        )

    def from_body(self, head: ResponseHead | int, body: ResponseBody) -> T:
        """Classify the response, then decode it once as ``T`` or as an API error.

        Raises :class:`ApiResponseError` for a well-formed error response and
        :class:`ParseResponseError` when the body cannot be read or decoded.
        """

        head = ResponseHead.of(head)
        classify = self._classifier or self._response_type.is_ok

        try:
            maybe = classify(head, Unbuffered(body))
            if not isinstance(maybe, MaybeOkResponse):
                raise TypeError("classifier must return a MaybeOkResponse")
            logger.debug(
                "response classified status=%s ok=%s buffered=%s",
                head.status,
                maybe.ok,
                maybe.buffered,
            )
            if maybe.ok:
                return maybe.body.parse_ok(self._response_type)
            error = maybe.body.parse_err()
        except ParseResponseError as exc:
            with_http_status(exc, head.status)
            logger.debug(
                "response parse failed status=%s cause=%s",
                head.status,
                exc.cause,
            )
            raise

        logger.debug("response api error status=%s error=%r", head.status, error)
        raise ApiResponseError(error, http_status=head.status)


def parse(
    response_type: type[ResponseType[T]],
    *,
    classifier: Classifier | None = None,
    config: ParserConfig | None = None,
) -> Parser[T]:
    """Bind a response type, e.g. ``parse(JsonValue).from_bytes(200, body)``."""

    return Parser(response_type, classifier=classifier, config=config)


__all__ = [
    "Parser",
    "parse",
]
