from __future__ import annotations

import random
from typing import Any

from ...outcome import Failure, Ok, business_failure
from .base import FunctionTool, ToolResult, ToolSpec, object_schema


INVERTED_RANGE = "min must be less than or equal to max"


def random_between(rng: random.Random, low: int, high: int) -> Ok[int] | Failure:
    if low > high:
        return business_failure(INVERTED_RANGE)
    return Ok(rng.randint(low, high))


def make_tool(*, rng: random.Random | None = None) -> FunctionTool:
    # SystemRandom draws from the OS per call, so there is no shared sequence state.
    source = rng if rng is not None else random.SystemRandom()

    def _handler(args: dict[str, Any]) -> ToolResult:
        res = random_between(source, args["min"], args["max"])
        if isinstance(res, Failure):
            return res
        return Ok(str(res.value))

    return FunctionTool(
        spec=ToolSpec(
            name="random_number",
            description="Generate a random number between min and max (inclusive)",
            input_schema=object_schema(
                {
                    "min": {"type": "integer", "description": "Minimum value (inclusive)"},
                    "max": {"type": "integer", "description": "Maximum value (inclusive)"},
                },
                required=["min", "max"],
            ),
        ),
        fn=_handler,
    )
