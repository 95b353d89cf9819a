from __future__ import annotations

import random
import time
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable

from ..core.settings import Settings
from ..observability.obs import api as obs
from ..observability.trace.context import TraceContext
from .errors import map_outcome_to_response
from .jsonrpc.codec import JsonRpcCodecError, decode_payload
from .jsonrpc.dispatcher import Dispatcher
from .jsonrpc.models import JsonRpcError, JsonRpcRequest, JsonRpcResponse
from .mcp.protocol import McpMethod, McpProtocol
from .mcp.resources.catalog import build_resource_catalog
from .mcp.tools.catalog import build_tool_registry


@dataclass
class McpServer:
    """Stateless request -> response core shared by every transport."""

    protocol: McpProtocol
    dispatcher: Dispatcher

    @classmethod
    def from_protocol(cls, protocol: McpProtocol) -> "McpServer":
        disp = Dispatcher(
            methods=McpMethod,
            handlers=protocol.handlers(),
            outcome_mapper=map_outcome_to_response,
        )
        return cls(protocol=protocol, dispatcher=disp)

    def handle(self, req: JsonRpcRequest) -> JsonRpcResponse:
        ctx = TraceContext.new(trace_type="rpc", method=req.method, request_id=_loggable_id(req.id))
        started = time.perf_counter()
        with TraceContext.activate(ctx):
            with obs.span("stage.dispatch", {"method": req.method}):
                obs.event("rpc.request", {"notification": req.is_notification})
                resp = self.dispatcher.handle(req)
                if resp.is_error:
                    obs.error("rpc.response", {"code": resp.error.code, "message": resp.error.message})
                else:
                    obs.event("rpc.response", {"ok": True})
                obs.metric("latency_ms", round((time.perf_counter() - started) * 1000.0, 3))
            ctx.finish()
        return resp

    def handle_payload(self, raw: Any) -> dict[str, Any]:
        """Decode an already-parsed JSON body, handle it, return the response dict."""
        try:
            req = decode_payload(raw)
        except JsonRpcCodecError as e:
            return JsonRpcResponse(id=e.req_id, error=JsonRpcError(e.code, e.message, e.data)).to_dict()
        return self.handle(req).to_dict()


def _loggable_id(req_id: Any) -> Any:
    if req_id is None or isinstance(req_id, (str, int, float)):
        return req_id
    return repr(req_id)


def build_server(
    settings: Settings | None = None,
    *,
    rng: random.Random | None = None,
    now: Callable[[], datetime] = datetime.now,
) -> McpServer:
    """Wire registries, protocol and dispatcher from settings.

    An explicit `rng` wins over `tools.random_seed`.
    """
    settings = settings or Settings()
    if rng is None and settings.tools.random_seed is not None:
        rng = random.Random(settings.tools.random_seed)

    protocol = McpProtocol(
        tools=build_tool_registry(rng=rng, now=now),
        resources=build_resource_catalog(
            server_name=settings.server.name,
            server_version=settings.server.version,
            now=now,
        ),
        server_name=settings.server.name,
        server_version=settings.server.version,
        protocol_version=settings.server.protocol_version,
        coerce_numeric_strings=settings.validation.coerce_numeric_strings,
    )
    return McpServer.from_protocol(protocol)
