from __future__ import annotations

from typing import Any

from ...outcome import Ok
from .base import FunctionTool, ToolResult, ToolSpec, object_schema


def echo(message: str) -> str:
    return f"Echo: {message}"


def _handler(args: dict[str, Any]) -> ToolResult:
    return Ok(echo(args["message"]))


tool = FunctionTool(
    spec=ToolSpec(
        name="echo",
        description="Echo back the provided message",
        input_schema=object_schema(
            {"message": {"type": "string", "description": "The message to echo back"}},
            required=["message"],
        ),
    ),
    fn=_handler,
)
