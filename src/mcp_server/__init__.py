"""Stateless MCP server: JSON-RPC core, MCP protocol layer and transports."""

from .server import McpServer, build_server

__all__ = ["McpServer", "build_server"]
