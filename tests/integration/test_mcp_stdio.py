from __future__ import annotations

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest


def _write_settings(tmp_path: Path) -> Path:
    cfg = tmp_path / "config"
    cfg.mkdir(parents=True, exist_ok=True)
    p = cfg / "settings.yaml"
    p.write_text(
        """
server:
  name: Stateless MCP Server
  transport: stdio
tools:
  random_seed: 7
paths:
  logs_dir: logs
""".strip()
        + "\n",
        encoding="utf-8",
    )
    return p


@pytest.mark.integration
def test_mcp_entry_stdio_session(tmp_path: Path) -> None:
    repo_root = Path(__file__).resolve().parents[2]
    settings_path = _write_settings(tmp_path)

    requests = [
        {"jsonrpc": "2.0", "id": 1, "method": "initialize", "params": {"protocolVersion": "2024-11-05"}},
        {"jsonrpc": "2.0", "method": "notifications/initialized"},
        {"jsonrpc": "2.0", "id": 2, "method": "tools/list"},
        {"jsonrpc": "2.0", "id": 3, "method": "tools/call", "params": {"name": "add", "arguments": {"a": 5, "b": 3}}},
        {"jsonrpc": "2.0", "id": 4, "method": "tools/call", "params": {"name": "divide", "arguments": {"a": 1, "b": 0}}},
        {"jsonrpc": "2.0", "id": 5, "method": "resources/read", "params": {"uri": "resource://welcome"}},
    ]
    stdin = "".join(json.dumps(r) + "\n" for r in requests) + "{oops\n"

    env = dict(os.environ)
    env["MCP_SERVER_SETTINGS_PATH"] = str(settings_path)
    p = subprocess.run(
        [sys.executable, "-m", "src.mcp_server.entry"],
        input=stdin,
        capture_output=True,
        text=True,
        cwd=str(repo_root),
        env=env,
        timeout=30,
    )
    assert p.returncode == 0, p.stderr

    out = [json.loads(line) for line in p.stdout.splitlines() if line.strip()]
    assert [r["id"] for r in out] == [1, 2, 3, 4, 5, None]
    assert out[0]["result"]["protocolVersion"] == "2024-11-05"
    assert len(out[1]["result"]["tools"]) == 8
    assert out[2]["result"]["content"][0]["text"] == "8.0"
    assert out[3]["error"]["message"] == "Tool execution error: Division by zero is not allowed"
    assert out[4]["result"]["contents"][0]["uri"] == "resource://welcome"
    assert out[5]["error"]["code"] == -32700

    traces = (tmp_path / "logs" / "traces.jsonl").read_text(encoding="utf-8").splitlines()
    # The notification is handled (and traced) even though it gets no reply.
    assert len(traces) == 6
    recs = [json.loads(t) for t in traces]
    assert all(r["trace_type"] == "rpc" for r in recs)
    assert [r["method"] for r in recs][:3] == ["initialize", "notifications/initialized", "tools/list"]
    assert sum(1 for r in recs if r["status"] == "error") == 2
