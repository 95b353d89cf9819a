from __future__ import annotations

from datetime import datetime
from typing import Any, Callable

from ...outcome import Ok
from .base import FunctionTool, ToolResult, ToolSpec, object_schema


Clock = Callable[[], datetime]

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def current_time_text(now: datetime, timezone: str | None = None) -> str:
    """Format the local wall clock.

    `timezone` only labels the output; the reading is not converted.
    """
    formatted = now.strftime(TIME_FORMAT)
    if timezone:
        return f"Current time (requested timezone: {timezone}): {formatted}"
    return f"Current time: {formatted}"


def make_tool(*, clock: Clock = datetime.now) -> FunctionTool:
    def _handler(args: dict[str, Any]) -> ToolResult:
        return Ok(current_time_text(clock(), args.get("timezone")))

    return FunctionTool(
        spec=ToolSpec(
            name="get_current_time",
            description="Returns the current date and time",
            input_schema=object_schema(
                {
                    "timezone": {
                        "type": "string",
                        "description": "Timezone (optional, defaults to system timezone)",
                    }
                }
            ),
        ),
        fn=_handler,
    )
