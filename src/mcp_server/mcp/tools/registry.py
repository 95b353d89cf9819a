from __future__ import annotations

from types import MappingProxyType
from typing import Any, Iterable, Mapping

from ...outcome import Failure, FailureKind, Ok
from .base import Tool


class ToolRegistry:
    """Immutable, ordered tool catalog.

    Built once from a sequence of tools; listing preserves declaration order.
    There is no register/unregister after construction.
    """

    def __init__(self, tools: Iterable[Tool]) -> None:
        by_name: dict[str, Tool] = {}
        for tool in tools:
            name = tool.spec.name
            if not isinstance(name, str) or not name:
                raise ValueError("tool name must be non-empty string")
            if name in by_name:
                raise ValueError(f"duplicate tool name: {name}")
            by_name[name] = tool
        self._tools: Mapping[str, Tool] = MappingProxyType(by_name)

    def resolve(self, name: str) -> Ok[Tool] | Failure:
        tool = self._tools.get(name)
        if tool is None:
            return Failure(FailureKind.UNKNOWN_TOOL, f"Unknown tool: {name}")
        return Ok(tool)

    def list_specs(self) -> list[dict[str, Any]]:
        return [tool.spec.to_dict() for tool in self._tools.values()]
