"""Static resource bodies.

Plain producers: no I/O, no state. The catalog decides which one serves a URI.
"""

from __future__ import annotations

import os
import platform
from datetime import datetime
from typing import Any


DOC_TOPICS = ("tools", "resources", "prompts", "getting-started")


def welcome_text() -> str:
    return (
        "Welcome to the Stateless MCP Server! This server provides tools and resources "
        "via the Model Context Protocol."
    )


def system_info(now: datetime, *, server_name: str, server_version: str) -> dict[str, Any]:
    return {
        "timestamp": now.isoformat(timespec="seconds"),
        "serverName": server_name,
        "version": server_version,
        "pythonVersion": platform.python_version(),
        "osName": platform.system(),
        "osVersion": platform.release(),
        "availableProcessors": os.cpu_count(),
    }


def server_config() -> dict[str, Any]:
    return {
        "name": "stateless-mcp-server",
        "protocol": "STATELESS",
        "capabilities": {
            "tools": True,
            "resources": True,
            "prompts": False,
            "logging": False,
        },
        "endpoints": {
            "mcp": "/mcp",
            "health": "/health",
        },
    }


_DOCS = {
    "tools": """\
# MCP Tools

Tools are executable functions that clients can invoke through the MCP protocol.

## Available Tools
- Calculator operations (add, subtract, multiply, divide, calculator)
- Utility functions (echo, get_current_time, random_number)

## Usage
Call a tool with `tools/call`, passing `name` and an `arguments` object that
matches the tool's `inputSchema` from `tools/list`.
""",
    "resources": """\
# MCP Resources

Resources are read-only data or content that clients can access.

## Available Resources
- resource://welcome - Welcome message
- resource://system/info - System information
- resource://config/server - Server configuration
- resource://docs/{topic} - Documentation
- resource://api/reference - API reference

## Usage
Read a resource with `resources/read`, passing its `uri`.
""",
    "prompts": """\
# MCP Prompts

Prompts are reusable templates that help structure interactions with language models.

## Availability
This server does not expose prompt templates; `prompts/*` methods answer
with `Method not found`.
""",
    "getting-started": """\
# Getting Started with the Stateless MCP Server

## Overview
A stateless JSON-RPC 2.0 server implementing the tools and resources parts
of the Model Context Protocol.

## Components
1. **Tools**: schema-validated executable functions
2. **Resources**: read-only documents addressed by URI

## Endpoints
- MCP Server: POST http://localhost:8080/mcp
- Health Check: GET http://localhost:8080/health

## Running
```bash
MCP_SERVER_SETTINGS_PATH=config/settings.yaml python -m src.mcp_server.entry
```
Set `server.transport` to `http` or `stdio` in the settings file.
""",
}


def docs_page(topic: str) -> str:
    """Documentation for `topic`; unknown topics get a listing, not an error."""
    page = _DOCS.get(topic.lower())
    if page is not None:
        return page
    return (
        f"Documentation topic '{topic}' not found. "
        f"Available topics: {', '.join(DOC_TOPICS)}"
    )


def api_reference(server_version: str) -> str:
    return f"""\
=== Stateless MCP Server API Reference ===

TOOLS:
- add(a, b): Add two numbers
- subtract(a, b): Subtract b from a
- multiply(a, b): Multiply two numbers
- divide(a, b): Divide a by b
- calculator(operation, a, b): Arithmetic keyed by operation
- echo(message): Echo back a message
- get_current_time(timezone): Get current date/time
- random_number(min, max): Generate random integer

RESOURCES:
- resource://welcome: Welcome message
- resource://system/info: System information (JSON)
- resource://config/server: Server configuration (JSON)
- resource://docs/{{topic}}: Documentation by topic
- resource://api/reference: This API reference

Server Version: {server_version}
Protocol: MCP (Model Context Protocol)
"""
