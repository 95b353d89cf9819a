from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Callable, Iterator, TextIO

from .codec import JsonRpcCodecError, decode_request, encode_error, encode_response
from .models import JsonRpcRequest, JsonRpcResponse


RequestHandler = Callable[[JsonRpcRequest], JsonRpcResponse]


@dataclass
class StdioTransport:
    """Line-delimited JSON-RPC 2.0 transport over stdio."""

    stdin: TextIO = field(default_factory=lambda: sys.stdin)
    stdout: TextIO = field(default_factory=lambda: sys.stdout)

    def serve_requests(self, handler: RequestHandler) -> None:
        """
        Read requests until EOF, dispatch each to `handler`, write responses.

        - Notification (no `id` member): handled, but no response is written.
        - Decode errors are answered with a JSON-RPC error and the loop continues.
        """
        for line in self._iter_lines():
            line = line.strip()
            if not line:
                continue
            try:
                req = decode_request(line)
            except JsonRpcCodecError as e:
                self._write(encode_error(e.req_id, e.code, e.message, e.data))
                continue

            resp = handler(req)
            if req.is_notification:
                continue
            self._write(encode_response(resp))

    def _iter_lines(self) -> Iterator[str]:
        while True:
            line = self.stdin.readline()
            if line == "":
                break
            yield line

    def _write(self, payload: str) -> None:
        self.stdout.write(payload + "\n")
        self.stdout.flush()
