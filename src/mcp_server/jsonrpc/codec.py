from __future__ import annotations

import json
import math
from typing import Any

from .models import JsonRpcError, JsonRpcRequest, JsonRpcResponse


# JSON-RPC 2.0 standard error codes.
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INTERNAL_ERROR = -32603


class JsonRpcCodecError(ValueError):
    def __init__(self, code: int, message: str, *, req_id: Any | None = None, data: Any | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.req_id = req_id
        self.data = data


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant: {name}")


def _finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"number out of range: {text}")
    return value


def parse_json(text: str | bytes) -> Any:
    """
    Parse strict JSON. `NaN`, `Infinity` and floats that overflow to infinity
    are rejected: none of them could be written back in a response.
    """
    try:
        return json.loads(text, parse_constant=_reject_constant, parse_float=_finite_float)
    except ValueError as e:
        raise JsonRpcCodecError(PARSE_ERROR, "Parse error", data=str(e)) from e


def decode_request(line: str) -> JsonRpcRequest:
    """
    Decode one JSON-RPC request from a line-delimited JSON string.
    """
    return decode_payload(parse_json(line))


def decode_payload(raw: Any) -> JsonRpcRequest:
    """
    Build a request from an already-parsed JSON value.

    The `jsonrpc` member is not enforced; only a non-empty string `method` is
    required. `params` and `id` are passed through untouched.
    """
    if not isinstance(raw, dict):
        raise JsonRpcCodecError(INVALID_REQUEST, "Invalid Request: root must be object")

    method = raw.get("method")
    if not isinstance(method, str) or not method:
        raise JsonRpcCodecError(
            INVALID_REQUEST, "Invalid Request: method must be non-empty string", req_id=raw.get("id")
        )

    jsonrpc = raw.get("jsonrpc")
    return JsonRpcRequest(
        jsonrpc=jsonrpc if isinstance(jsonrpc, str) else "2.0",
        method=method,
        params=raw.get("params"),
        id=raw.get("id"),
        is_notification="id" not in raw,
    )


def encode_response(resp: JsonRpcResponse) -> str:
    return json.dumps(resp.to_dict(), ensure_ascii=False, separators=(",", ":"))


def encode_error(req_id: Any | None, code: int, message: str, data: Any | None = None) -> str:
    resp = JsonRpcResponse(id=req_id, error=JsonRpcError(code=code, message=message, data=data))
    return encode_response(resp)
