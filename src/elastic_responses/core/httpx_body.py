"""Adapt ``httpx.Response`` objects to response body sources."""

from __future__ import annotations

from collections.abc import Iterator

import httpx

from ..config import ParserConfig
from .body import ReadBody, ResponseBody, SliceBody


class _ChunkReader:
    """File-like view over an httpx byte iterator.

    A read returns at most the rest of the current chunk, so no byte is
    copied more than once.
    """

    def __init__(self, chunks: Iterator[bytes]) -> None:
        self._chunks = chunks
        self._pending = b""
        self._offset = 0
        self._exhausted = False

    def _next_chunk(self) -> bool:
        while not self._exhausted:
            try:
                chunk = next(self._chunks)
            except StopIteration:
                self._exhausted = True
                break
            except (httpx.HTTPError, httpx.StreamError) as exc:
                raise OSError(f"response stream failed: {exc.__class__.__name__}") from exc
            if chunk:
                self._pending, self._offset = chunk, 0
                return True
        return False

    def read(self, size: int = -1, /) -> bytes:
        if size < 0:
            parts = [self._pending[self._offset :]]
            while self._next_chunk():
                parts.append(self._pending)
            self._pending, self._offset = b"", 0
            return b"".join(parts)

        if self._offset >= len(self._pending) and not self._next_chunk():
            return b""
        end = self._offset + size
        data = self._pending[self._offset : end]
        self._offset = min(end, len(self._pending))
        return data


def body_from_httpx(response: httpx.Response, config: ParserConfig) -> ResponseBody:
    """Use loaded content as a slice, otherwise stream the unread body once."""

    try:
        content = response.content
    except httpx.ResponseNotRead:
        return ReadBody(
            _ChunkReader(response.iter_bytes()),
            chunk_size=config.read_chunk_size,
            max_bytes=config.max_body_bytes,
        )
    return SliceBody(content)


__all__ = [
    "body_from_httpx",
]
