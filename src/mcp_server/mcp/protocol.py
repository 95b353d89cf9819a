from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from ...observability.obs import api as obs
from ..jsonrpc.models import JsonRpcRequest
from ..outcome import Failure, FailureKind, Ok, Outcome, validation_failure
from .envelope import text_result
from .resources.catalog import ResourceCatalog
from .schema import validate_tool_args
from .tools.registry import ToolRegistry


TOOL_ERROR_CONTEXT = "Tool execution error"
RESOURCE_ERROR_CONTEXT = "Resource read error"


class McpMethod(str, Enum):
    """The closed set of JSON-RPC methods this server answers."""

    INITIALIZE = "initialize"
    TOOLS_LIST = "tools/list"
    TOOLS_CALL = "tools/call"
    RESOURCES_LIST = "resources/list"
    RESOURCES_READ = "resources/read"


def _params_dict(params: Any) -> dict[str, Any]:
    return params if isinstance(params, dict) else {}


@dataclass(frozen=True)
class McpProtocol:
    """MCP semantic layer.

    Transport-agnostic: every handler takes the decoded request and returns an
    `Ok`/`Failure` outcome. Nothing here keeps state between requests.
    """

    tools: ToolRegistry
    resources: ResourceCatalog
    server_name: str = "Stateless MCP Server"
    server_version: str = "1.0.0"
    protocol_version: str = "2024-11-05"
    coerce_numeric_strings: bool = False

    def handlers(self) -> dict[McpMethod, Callable[[JsonRpcRequest], Outcome]]:
        return {
            McpMethod.INITIALIZE: self.handle_initialize,
            McpMethod.TOOLS_LIST: self.handle_tools_list,
            McpMethod.TOOLS_CALL: self.handle_tools_call,
            McpMethod.RESOURCES_LIST: self.handle_resources_list,
            McpMethod.RESOURCES_READ: self.handle_resources_read,
        }

    def handle_initialize(self, req: JsonRpcRequest) -> Outcome:
        return Ok(
            {
                "protocolVersion": self.protocol_version,
                "serverInfo": {"name": self.server_name, "version": self.server_version},
                "capabilities": {
                    "tools": {"listChanged": False},
                    "resources": {"subscribe": False, "listChanged": False},
                },
            }
        )

    def handle_tools_list(self, req: JsonRpcRequest) -> Outcome:
        return Ok({"tools": self.tools.list_specs()})

    def handle_tools_call(self, req: JsonRpcRequest) -> Outcome:
        params = _params_dict(req.params)
        name = params.get("name")
        obs.event("tool.call", {"tool": name})

        res = self._call_tool(name, params.get("arguments"))
        if isinstance(res, Failure):
            obs.error("tool.failure", {"tool": name, "kind": res.kind.value, "message": res.message})
            return res.within(TOOL_ERROR_CONTEXT)
        return Ok(text_result(res.value))

    def _call_tool(self, name: Any, arguments: Any) -> Ok[str] | Failure:
        if not isinstance(name, str) or not name:
            return validation_failure("missing tool name")

        resolved = self.tools.resolve(name)
        if isinstance(resolved, Failure):
            return resolved
        tool = resolved.value

        args = validate_tool_args(
            tool.spec.input_schema,
            arguments,
            coerce_numeric_strings=self.coerce_numeric_strings,
        )
        if isinstance(args, Failure):
            return args

        try:
            return tool.call(args.value)
        except Exception as e:
            return Failure(FailureKind.UNEXPECTED, str(e) or type(e).__name__)

    def handle_resources_list(self, req: JsonRpcRequest) -> Outcome:
        return Ok({"resources": self.resources.list_specs()})

    def handle_resources_read(self, req: JsonRpcRequest) -> Outcome:
        uri = _params_dict(req.params).get("uri")
        obs.event("resource.read", {"uri": uri})
        if not isinstance(uri, str) or not uri:
            return validation_failure("missing resource uri").within(RESOURCE_ERROR_CONTEXT)

        res = self.resources.read(uri)
        if isinstance(res, Failure):
            obs.error("resource.read", {"uri": uri, "kind": res.kind.value})
            return res.within(RESOURCE_ERROR_CONTEXT)
        return res
