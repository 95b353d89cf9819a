from __future__ import annotations

import json

import pytest

from src.mcp_server.jsonrpc.codec import (
    INVALID_REQUEST,
    PARSE_ERROR,
    JsonRpcCodecError,
    decode_payload,
    decode_request,
    encode_error,
    encode_response,
    parse_json,
)
from src.mcp_server.jsonrpc.models import JsonRpcError, JsonRpcResponse


def test_decode_request_ok() -> None:
    req = decode_request('{"jsonrpc":"2.0","id":1,"method":"ping","params":{"a":1}}')
    assert req.id == 1
    assert req.method == "ping"
    assert req.params == {"a": 1}
    assert req.is_notification is False


def test_decode_request_parse_error() -> None:
    with pytest.raises(JsonRpcCodecError) as e:
        decode_request("{not json")
    assert e.value.code == PARSE_ERROR


@pytest.mark.parametrize("value", ["NaN", "Infinity", "-Infinity", "1e400"])
def test_decode_request_rejects_non_finite_numbers(value: str) -> None:
    with pytest.raises(JsonRpcCodecError) as e:
        decode_request(f'{{"jsonrpc":"2.0","id":{value},"method":"tools/list"}}')
    assert e.value.code == PARSE_ERROR
    assert e.value.req_id is None


def test_parse_json_accepts_bytes_and_large_integers() -> None:
    assert parse_json(b'{"a": 1.5, "n": 1e308}') == {"a": 1.5, "n": 1e308}
    assert parse_json("[100000000000000000000000000000]") == [10**29]
    with pytest.raises(JsonRpcCodecError) as e:
        parse_json(b"\xff")
    assert e.value.code == PARSE_ERROR


def test_decode_request_missing_method_is_invalid_request() -> None:
    with pytest.raises(JsonRpcCodecError) as e:
        decode_request('{"jsonrpc":"2.0","id":7,"params":{}}')
    assert e.value.code == INVALID_REQUEST
    assert e.value.req_id == 7


def test_decode_payload_rejects_non_object_root() -> None:
    with pytest.raises(JsonRpcCodecError) as e:
        decode_payload([1, 2, 3])
    assert e.value.code == INVALID_REQUEST


def test_decode_payload_tolerates_missing_jsonrpc_and_params() -> None:
    req = decode_payload({"method": "tools/list", "id": "abc"})
    assert req.jsonrpc == "2.0"
    assert req.params is None
    assert req.id == "abc"


def test_decode_payload_null_id_vs_absent_id() -> None:
    explicit = decode_payload({"jsonrpc": "2.0", "method": "initialize", "id": None})
    assert explicit.id is None
    assert explicit.is_notification is False

    absent = decode_payload({"jsonrpc": "2.0", "method": "initialize"})
    assert absent.id is None
    assert absent.is_notification is True


def test_encode_error_shape() -> None:
    s = encode_error(1, -32000, "bad", {"x": 1})
    obj = json.loads(s)
    assert obj["jsonrpc"] == "2.0"
    assert obj["id"] == 1
    assert obj["error"]["code"] == -32000
    assert obj["error"]["message"] == "bad"
    assert obj["error"]["data"] == {"x": 1}
    assert "result" not in obj


def test_encode_response_keeps_null_result_and_null_id() -> None:
    obj = json.loads(encode_response(JsonRpcResponse(id=None, result=None)))
    assert obj == {"jsonrpc": "2.0", "id": None, "result": None}


def test_response_emits_exactly_one_of_result_and_error() -> None:
    ok = JsonRpcResponse(id=3, result=None)
    assert ok.is_error is False
    assert ok.to_dict() == {"jsonrpc": "2.0", "id": 3, "result": None}

    failed = JsonRpcResponse(id=3, result={"ignored": True}, error=JsonRpcError(-32601, "Method not found: x"))
    assert failed.is_error is True
    assert failed.to_dict() == {"jsonrpc": "2.0", "id": 3, "error": {"code": -32601, "message": "Method not found: x"}}
