from __future__ import annotations

import pytest

from elastic_responses.core.body import ReadBody, SliceBody, read_to_end
from elastic_responses.core.classify import JsonValue
from elastic_responses.core.errors import BodyConsumedError, ParseResponseError
from tests.shared.bodies import CountingReader, FailingReader


def test_slice_body_can_be_buffered_and_decoded_repeatedly():
    body = SliceBody(b'{"a": 1}')
    value, buffered = body.buffer()
    assert value == {"a": 1}
    assert buffered is body
    assert body.parse_ok(JsonValue) == {"a": 1}
    assert body.parse_ok(JsonValue) == {"a": 1}


def test_slice_body_accepts_memoryview_and_bytearray():
    assert SliceBody(memoryview(b"[1, 2]")).parse_ok(JsonValue) == [1, 2]
    assert SliceBody(bytearray(b"true")).parse_ok(JsonValue) is True


def test_slice_body_rejects_text():
    with pytest.raises(TypeError):
        SliceBody('{"a": 1}')  # type: ignore[arg-type]


def test_read_body_buffer_returns_slice_with_same_bytes():
    reader = CountingReader(b'{"a": 1}')
    value, buffered = ReadBody(reader).buffer()
    assert value == {"a": 1}
    assert isinstance(buffered, SliceBody)
    assert bytes(buffered.data) == b'{"a": 1}'
    assert reader.exhausted


def test_read_body_is_single_use():
    body = ReadBody(CountingReader(b'{"a": 1}'))
    assert body.parse_ok(JsonValue) == {"a": 1}
    assert body.consumed
    with pytest.raises(BodyConsumedError):
        body.parse_ok(JsonValue)
    with pytest.raises(BodyConsumedError):
        body.buffer()


def test_read_body_maps_read_failure_to_io_parse_error():
    body = ReadBody(FailingReader(prefix=b'{"a"'))
    with pytest.raises(ParseResponseError) as exc_info:
        body.parse_ok(JsonValue)
    assert exc_info.value.cause == "io"
    assert isinstance(exc_info.value.__cause__, ConnectionResetError)


def test_malformed_json_is_json_parse_error():
    with pytest.raises(ParseResponseError) as exc_info:
        SliceBody(b"not json").buffer()
    assert exc_info.value.cause == "json"


def test_invalid_utf8_is_json_parse_error():
    with pytest.raises(ParseResponseError) as exc_info:
        SliceBody(b'{"a": "\xff\xfe"}').parse_ok(JsonValue)
    assert exc_info.value.cause == "json"


def test_read_to_end_reads_in_chunks_until_empty():
    reader = CountingReader(b"x" * 10)
    assert read_to_end(reader, chunk_size=4) == b"x" * 10
    assert reader.reads == 4


def test_read_to_end_enforces_max_bytes():
    with pytest.raises(ParseResponseError) as exc_info:
        read_to_end(CountingReader(b"x" * 10), chunk_size=4, max_bytes=6)
    assert exc_info.value.cause == "body_too_large"


def test_shape_mismatch_in_from_json_is_shape_parse_error():
    class _Strict(JsonValue):
        @classmethod
        def from_json(cls, value):
            return value["missing"]

    with pytest.raises(ParseResponseError) as exc_info:
        SliceBody(b"{}").parse_ok(_Strict)
    assert exc_info.value.cause == "shape"
    assert isinstance(exc_info.value.__cause__, KeyError)


def test_parse_error_raised_by_from_json_passes_through():
    class _Picky(JsonValue):
        @classmethod
        def from_json(cls, value):
            raise ParseResponseError("custom", cause="shape")

    with pytest.raises(ParseResponseError, match="custom"):
        SliceBody(b"{}").parse_ok(_Picky)


def test_parse_err_decodes_api_error_shape():
    from elastic_responses.core.api_errors import IndexNotFound

    body = SliceBody(b'{"error": "index_not_found", "index": "foo"}')
    assert body.parse_err() == IndexNotFound(index="foo")


def test_deeply_nested_json_is_json_parse_error():
    data = b"[" * 100_000 + b"]" * 100_000
    with pytest.raises(ParseResponseError) as exc_info:
        SliceBody(data).parse_ok(JsonValue)
    assert exc_info.value.cause == "json"
    assert isinstance(exc_info.value.__cause__, RecursionError)


@pytest.mark.parametrize("data", [b"NaN", b"Infinity", b"-Infinity", b'{"score": NaN}'])
def test_non_finite_constants_are_json_parse_errors(data):
    with pytest.raises(ParseResponseError) as exc_info:
        SliceBody(data).buffer()
    assert exc_info.value.cause == "json"
