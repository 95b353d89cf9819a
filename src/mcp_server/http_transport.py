"""HTTP transport: one JSON-RPC endpoint at `POST /mcp`.

Endpoints:
  POST /mcp     -> body: a JSON-RPC 2.0 request; response: the JSON-RPC envelope
  GET  /health  -> {"status": "ok"}

Every JSON-RPC outcome, errors included, is returned with HTTP 200; the error
lives in the envelope, not in the status code.
"""

from __future__ import annotations

from typing import Any, Dict

import uvicorn
from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from .jsonrpc.codec import JsonRpcCodecError, parse_json
from .jsonrpc.models import JsonRpcError, JsonRpcResponse
from .server import McpServer


def create_app(server: McpServer) -> FastAPI:
    app = FastAPI(title=server.protocol.server_name, version=server.protocol.server_version)

    @app.get("/health")
    def health() -> Dict[str, str]:
        return {"status": "ok"}

    @app.post("/mcp")
    async def mcp(request: Request) -> JSONResponse:
        body = await request.body()
        try:
            raw: Any = parse_json(body)
        except JsonRpcCodecError as e:
            err = JsonRpcResponse(id=None, error=JsonRpcError(e.code, e.message, e.data))
            return JSONResponse(err.to_dict())
        # Handlers are synchronous; keep them off the event loop.
        payload = await run_in_threadpool(server.handle_payload, raw)
        return JSONResponse(payload)

    return app


def serve_http(server: McpServer, *, host: str, port: int) -> None:
    uvicorn.run(create_app(server), host=host, port=port)
