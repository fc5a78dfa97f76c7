"""Parser configuration."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_READ_CHUNK_SIZE = 64 * 1024


@dataclass(slots=True, frozen=True)
class ParserConfig:
    """Runtime settings for reading response bodies."""

    read_chunk_size: int = DEFAULT_READ_CHUNK_SIZE
    max_body_bytes: int | None = None

    def validate(self) -> None:
        if isinstance(self.read_chunk_size, bool) or not isinstance(self.read_chunk_size, int):
            raise ValueError("read_chunk_size must be int")
        if self.read_chunk_size <= 0:
            raise ValueError("read_chunk_size must be > 0")
        if self.max_body_bytes is None:
            return
        if isinstance(self.max_body_bytes, bool) or not isinstance(self.max_body_bytes, int):
            raise ValueError("max_body_bytes must be int or None")
        if self.max_body_bytes <= 0:
            raise ValueError("max_body_bytes must be > 0")


__all__ = [
    "DEFAULT_READ_CHUNK_SIZE",
    "ParserConfig",
]
