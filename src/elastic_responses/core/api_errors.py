"""API error shapes and the mapping from Elasticsearch error bodies."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from .errors import ParseResponseError


@dataclass(slots=True, frozen=True)
class IndexNotFound:
    index: str


@dataclass(slots=True, frozen=True)
class IndexAlreadyExists:
    index: str


@dataclass(slots=True, frozen=True)
class DocumentMissing:
    index: str


@dataclass(slots=True, frozen=True)
class Parsing:
    line: int | None
    col: int | None
    reason: str | None


@dataclass(slots=True, frozen=True)
class MapperParsing:
    reason: str | None


@dataclass(slots=True, frozen=True)
class ActionRequestValidation:
    reason: str | None


@dataclass(slots=True, frozen=True)
class Other:
    """An error type without a dedicated shape; the raw error object is kept."""

    error_type: str | None
    reason: str | None
    payload: Mapping[str, object] = field(default_factory=dict)


ApiError = (
    IndexNotFound
    | IndexAlreadyExists
    | DocumentMissing
    | Parsing
    | MapperParsing
    | ActionRequestValidation
    | Other
)


def _to_int(value: object) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if text.isdigit():
            return int(text)
    return None


def _optional_text(error: Mapping[str, object], key: str) -> str | None:
    value = error.get(key)
    return str(value) if value is not None else None


def _required_text(error: Mapping[str, object], key: str, error_type: str) -> str:
    value = error.get(key)
    if not isinstance(value, str):
        raise ParseResponseError(
            f"{error_type} error body is missing string field '{key}'",
            cause="shape",
        )
    return value


def _normalize_type(error_type: str) -> str:
    return error_type.removesuffix("_exception")


def _from_typed_error(error_type: str, error: Mapping[str, object]) -> ApiError:
    kind = _normalize_type(error_type)
    if kind == "index_not_found":
        return IndexNotFound(index=_required_text(error, "index", error_type))
    if kind in {"index_already_exists", "resource_already_exists"}:
        return IndexAlreadyExists(index=_required_text(error, "index", error_type))
    if kind == "document_missing":
        return DocumentMissing(index=_required_text(error, "index", error_type))
    if kind == "parsing":
        return Parsing(
            line=_to_int(error.get("line")),
            col=_to_int(error.get("col")),
            reason=_optional_text(error, "reason"),
        )
    if kind == "mapper_parsing":
        return MapperParsing(reason=_optional_text(error, "reason"))
    if kind == "action_request_validation":
        return ActionRequestValidation(reason=_optional_text(error, "reason"))
    return Other(
        error_type=error_type,
        reason=_optional_text(error, "reason"),
        payload=dict(error),
    )


_KNOWN_TYPES = frozenset(
    {
        "index_not_found",
        "index_already_exists",
        "resource_already_exists",
        "document_missing",
        "parsing",
        "mapper_parsing",
        "action_request_validation",
    }
)


def parse_api_error(payload: object) -> ApiError:
    """Map a decoded error body to an API error shape.

    Two layouts are accepted. The nested one used by current Elasticsearch
    releases::

        {"error": {"type": "index_not_found_exception", "index": "foo"}, "status": 404}

    and the flat one where ``error`` names the type and its fields sit beside it::

        {"error": "index_not_found", "index": "foo"}

    A string ``error`` that is not a known type name is kept as the reason of
    an :class:`Other` error.
    """

    if not isinstance(payload, Mapping):
        raise ParseResponseError("error body must be a JSON object", cause="shape")
    if "error" not in payload:
        raise ParseResponseError("error body is missing the 'error' field", cause="shape")

    error = payload["error"]
    if isinstance(error, Mapping):
        error_type = error.get("type")
        if not isinstance(error_type, str):
            return Other(
                error_type=None,
                reason=_optional_text(error, "reason"),
                payload=dict(error),
            )
        return _from_typed_error(error_type, error)

    if isinstance(error, str):
        if _normalize_type(error) in _KNOWN_TYPES:
            return _from_typed_error(error, payload)
        return Other(error_type=None, reason=error, payload=dict(payload))

    raise ParseResponseError(
        "error body field 'error' must be an object or a string",
        cause="shape",
    )


__all__ = [
    "ApiError",
    "IndexNotFound",
    "IndexAlreadyExists",
    "DocumentMissing",
    "Parsing",
    "MapperParsing",
    "ActionRequestValidation",
    "Other",
    "parse_api_error",
]
