from __future__ import annotations

from typing import Any

from ...outcome import Failure, Ok
from .arithmetic import Operation, apply
from .base import FunctionTool, ToolResult, ToolSpec, number_param, object_schema


def calculate(op: Operation, a: float, b: float) -> ToolResult:
    res = apply(op, a, b)
    if isinstance(res, Failure):
        return res
    return Ok(f"Result: {a:.2f} {op.symbol} {b:.2f} = {res.value:.2f}")


def _handler(args: dict[str, Any]) -> ToolResult:
    # The schema enum already restricted `operation` to Operation values.
    return calculate(Operation(args["operation"]), args["a"], args["b"])


tool = FunctionTool(
    spec=ToolSpec(
        name="calculator",
        description="Performs basic arithmetic operations",
        input_schema=object_schema(
            {
                "operation": {
                    "type": "string",
                    "enum": [op.value for op in Operation],
                    "description": "The operation to perform",
                },
                "a": number_param("First number"),
                "b": number_param("Second number"),
            },
            required=["operation", "a", "b"],
        ),
    ),
    fn=_handler,
)
