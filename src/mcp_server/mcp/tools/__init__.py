"""Tool catalog: specs, typed operations and the immutable registry."""

from .base import FunctionTool, Tool, ToolResult, ToolSpec
from .catalog import build_tool_registry
from .registry import ToolRegistry

__all__ = ["Tool", "ToolSpec", "ToolResult", "FunctionTool", "ToolRegistry", "build_tool_registry"]
