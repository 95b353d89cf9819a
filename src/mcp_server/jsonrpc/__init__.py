"""Transport-neutral JSON-RPC 2.0 plumbing: wire models, codec, dispatch, stdio."""

from .codec import JsonRpcCodecError, decode_payload, decode_request, encode_error, encode_response
from .dispatcher import Dispatcher
from .models import JsonRpcError, JsonRpcRequest, JsonRpcResponse
from .stdio_transport import StdioTransport

__all__ = [
    "Dispatcher",
    "JsonRpcCodecError",
    "JsonRpcError",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "StdioTransport",
    "decode_payload",
    "decode_request",
    "encode_error",
    "encode_response",
]
