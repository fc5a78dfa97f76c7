"""Field extraction helpers for decoded response objects.

Helpers raise ``KeyError``/``TypeError`` on a shape mismatch; the parsing
pipeline reports those as parse errors.
"""

from __future__ import annotations

from collections.abc import Mapping

JsonObject = Mapping[str, object]


def as_object(value: object, *, what: str = "response body") -> JsonObject:
    if not isinstance(value, Mapping):
        raise TypeError(f"{what} must be a JSON object")
    return value


def required_str(payload: JsonObject, key: str) -> str:
    value = payload[key]
    if not isinstance(value, str):
        raise TypeError(f"'{key}' must be a string")
    return value


def optional_str(payload: JsonObject, key: str) -> str | None:
    value = payload.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise TypeError(f"'{key}' must be a string")
    return value


def required_bool(payload: JsonObject, key: str) -> bool:
    value = payload[key]
    if not isinstance(value, bool):
        raise TypeError(f"'{key}' must be a boolean")
    return value


def optional_int(payload: JsonObject, key: str) -> int | None:
    value = payload.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"'{key}' must be an integer")
    return value


__all__ = [
    "JsonObject",
    "as_object",
    "required_str",
    "optional_str",
    "required_bool",
    "optional_int",
]
