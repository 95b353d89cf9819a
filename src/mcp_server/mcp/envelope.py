from __future__ import annotations

from typing import Any


def text_result(text: str) -> dict[str, Any]:
    """Build the MCP tools/call result for a text-only tool output.

    Contract: `content` is a non-empty array whose first item is a text item.
    """
    if not isinstance(text, str):
        raise TypeError(f"tool returned unsupported output type: {type(text).__name__}")
    return {"content": [{"type": "text", "text": text}]}
