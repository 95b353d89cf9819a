"""JSON-RPC 2.0 wire models shared by the stdio and HTTP transports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


JsonDict = dict[str, Any]


@dataclass(frozen=True)
class JsonRpcRequest:
    """A decoded request.

    `id` is whatever the client sent (string, number or null) and is echoed
    back untouched. `is_notification` is True only when the `id` member was
    absent altogether; an explicit `"id": null` is still a request.
    """

    jsonrpc: str
    method: str
    params: Any | None
    id: Any | None
    is_notification: bool = False


@dataclass(frozen=True)
class JsonRpcError:
    code: int
    message: str
    data: Any | None = None

    def to_dict(self) -> JsonDict:
        err: JsonDict = {"code": self.code, "message": self.message}
        if self.data is not None:
            err["data"] = self.data
        return err


@dataclass(frozen=True)
class JsonRpcResponse:
    """Response envelope; `to_dict` emits exactly one of `result`/`error`.

    A success whose result is None still serializes as `"result": null`.
    """

    jsonrpc: str = "2.0"
    id: Any | None = None
    result: Any | None = None
    error: JsonRpcError | None = None

    @property
    def is_error(self) -> bool:
        return self.error is not None

    def to_dict(self) -> JsonDict:
        body: JsonDict = {"jsonrpc": self.jsonrpc, "id": self.id}
        if self.is_error:
            body["error"] = self.error.to_dict()
        else:
            body["result"] = self.result
        return body
