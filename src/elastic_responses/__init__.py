"""Public package exports for Elasticsearch response parsing."""

from .config import ParserConfig
from .core.api_errors import (
    ActionRequestValidation,
    ApiError,
    DocumentMissing,
    IndexAlreadyExists,
    IndexNotFound,
    MapperParsing,
    Other,
    Parsing,
)
from .core.classify import JsonValue, StatusClassified, is_ok_by_status
from .core.errors import (
    ApiResponseError,
    BodyConsumedError,
    ParseResponseError,
    ResponseError,
)
from .core.models import ResponseHead
from .core.parsing import Parser, parse
from .core.state import Buffered, MaybeOkResponse, Unbuffered
from .responses import CommandResponse, GetResponse, IndexResponse, PingResponse

__all__ = [
    "parse",
    "Parser",
    "ParserConfig",
    "ResponseHead",
    "JsonValue",
    "StatusClassified",
    "is_ok_by_status",
    "MaybeOkResponse",
    "Unbuffered",
    "Buffered",
    "ResponseError",
    "ParseResponseError",
    "ApiResponseError",
    "BodyConsumedError",
    "ApiError",
    "IndexNotFound",
    "IndexAlreadyExists",
    "DocumentMissing",
    "Parsing",
    "MapperParsing",
    "ActionRequestValidation",
    "Other",
    "PingResponse",
    "GetResponse",
    "IndexResponse",
    "CommandResponse",
]
