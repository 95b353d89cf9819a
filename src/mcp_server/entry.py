from __future__ import annotations

import os
from pathlib import Path

from ..core.settings import Settings, load_settings
from ..observability.obs import api as obs
from ..observability.sinks.jsonl import JsonlSink
from .jsonrpc import StdioTransport
from .server import McpServer, build_server


def build_observability(settings: Settings) -> JsonlSink:
    sink = JsonlSink(settings.paths.logs_dir)
    obs.set_sink(sink)
    return sink


def build_runtime(settings_path: str | Path) -> tuple[Settings, McpServer]:
    settings = load_settings(settings_path)
    _ = build_observability(settings)
    return settings, build_server(settings)


def serve(settings_path: str | Path) -> None:
    settings, server = build_runtime(settings_path)
    if settings.server.transport == "http":
        # Imported lazily so the stdio path does not pull in the web stack.
        from .http_transport import serve_http

        serve_http(server, host=settings.server.http_host, port=settings.server.http_port)
        return
    StdioTransport().serve_requests(server.handle)


def main() -> None:
    settings_path = os.environ.get("MCP_SERVER_SETTINGS_PATH", "config/settings.yaml")
    serve(settings_path)


if __name__ == "__main__":  # pragma: no cover
    main()
