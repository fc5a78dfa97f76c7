"""Typed response package."""

from .models import CommandResponse, GetResponse, IndexResponse, PingResponse

__all__ = [
    "PingResponse",
    "GetResponse",
    "IndexResponse",
    "CommandResponse",
]
