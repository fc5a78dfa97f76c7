"""Typed responses for the simple Elasticsearch endpoints."""

from __future__ import annotations

from dataclasses import dataclass

from ..core.classify import StatusClassified
from ..core.models import ResponseHead
from ..core.state import MaybeOkResponse, Unbuffered
from .fields import (
    as_object,
    optional_int,
    optional_str,
    required_bool,
    required_str,
)


@dataclass(slots=True, frozen=True)
class PingResponse(StatusClassified):
    name: str | None
    cluster_name: str
    tagline: str | None
    version_number: str | None

    @classmethod
    def from_json(cls, value: object) -> "PingResponse":
        payload = as_object(value)
        version = payload.get("version")
        version_number = None
        if version is not None:
            version_number = optional_str(as_object(version, what="version"), "number")
        return cls(
            name=optional_str(payload, "name"),
            cluster_name=required_str(payload, "cluster_name"),
            tagline=optional_str(payload, "tagline"),
            version_number=version_number,
        )


@dataclass(slots=True, frozen=True)
class GetResponse:
    """A document get result; ``found`` is False for a missing document."""

    index: str
    doc_type: str | None
    id: str
    version: int | None
    found: bool
    source: object | None

    @classmethod
    def is_ok(cls, head: ResponseHead, body: Unbuffered) -> MaybeOkResponse:
        if head.is_success():
            return MaybeOkResponse.success(body)
        if head.status != 404:
            return MaybeOkResponse.failure(body)

        # A 404 is either a missing document (ok, found=false) or a missing
        # index (error body).
        value, buffered = body.buffer()
        has_error = not isinstance(value, dict) or "error" in value
        return MaybeOkResponse(ok=not has_error, body=buffered)

    @classmethod
    def from_json(cls, value: object) -> "GetResponse":
        payload = as_object(value)
        return cls(
            index=required_str(payload, "_index"),
            doc_type=optional_str(payload, "_type"),
            id=required_str(payload, "_id"),
            version=optional_int(payload, "_version"),
            found=required_bool(payload, "found"),
            source=payload.get("_source"),
        )


@dataclass(slots=True, frozen=True)
class IndexResponse(StatusClassified):
    index: str
    doc_type: str | None
    id: str
    version: int | None
    created: bool

    @classmethod
    def from_json(cls, value: object) -> "IndexResponse":
        payload = as_object(value)
        created = payload.get("created")
        if not isinstance(created, bool):
            created = optional_str(payload, "result") == "created"
        return cls(
            index=required_str(payload, "_index"),
            doc_type=optional_str(payload, "_type"),
            id=required_str(payload, "_id"),
            version=optional_int(payload, "_version"),
            created=created,
        )


@dataclass(slots=True, frozen=True)
class CommandResponse(StatusClassified):
    """Acknowledgement returned by index and mapping management calls."""

    acknowledged: bool

    @classmethod
    def from_json(cls, value: object) -> "CommandResponse":
        return cls(acknowledged=required_bool(as_object(value), "acknowledged"))


__all__ = [
    "PingResponse",
    "GetResponse",
    "IndexResponse",
    "CommandResponse",
]
