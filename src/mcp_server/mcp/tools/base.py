from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Callable, Protocol

from ...outcome import Failure, Ok


ToolResult = Ok[str] | Failure
ToolHandler = Callable[[dict[str, Any]], ToolResult]


@dataclass(frozen=True)
class ToolSpec:
    name: str
    description: str
    input_schema: dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        # Listings get their own copy; the registry keeps validating against the original.
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": copy.deepcopy(self.input_schema),
        }


class Tool(Protocol):
    spec: ToolSpec

    def call(self, args: dict[str, Any]) -> ToolResult:
        ...


@dataclass(frozen=True)
class FunctionTool:
    """Tool backed by a handler that receives already-validated arguments."""

    spec: ToolSpec
    fn: ToolHandler

    def call(self, args: dict[str, Any]) -> ToolResult:
        return self.fn(args)


def object_schema(properties: dict[str, dict[str, Any]], required: list[str] | None = None) -> dict[str, Any]:
    return {
        "type": "object",
        "properties": properties,
        "required": list(required or []),
    }


def number_param(description: str) -> dict[str, Any]:
    return {"type": "number", "description": description}
