from __future__ import annotations

from enum import Enum
from typing import Any

from ...outcome import Failure, Ok, business_failure
from .base import FunctionTool, ToolResult, ToolSpec, number_param, object_schema


DIVISION_BY_ZERO = "Division by zero is not allowed"


class Operation(str, Enum):
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS = {
    Operation.ADD: "+",
    Operation.SUBTRACT: "-",
    Operation.MULTIPLY: "×",
    Operation.DIVIDE: "÷",
}


def apply(op: Operation, a: float, b: float) -> Ok[float] | Failure:
    if op is Operation.ADD:
        return Ok(a + b)
    if op is Operation.SUBTRACT:
        return Ok(a - b)
    if op is Operation.MULTIPLY:
        return Ok(a * b)
    if op is Operation.DIVIDE:
        if b == 0:
            return business_failure(DIVISION_BY_ZERO)
        return Ok(a / b)
    raise AssertionError(f"unhandled operation: {op!r}")


def format_number(value: float) -> str:
    # Results are always reported as floats, e.g. 5 + 3 -> "8.0".
    return repr(float(value))


_DESCRIPTIONS = {
    Operation.ADD: ("Add two numbers together", "First number", "Second number"),
    Operation.SUBTRACT: ("Subtract second number from first number", "First number", "Second number"),
    Operation.MULTIPLY: ("Multiply two numbers", "First number", "Second number"),
    Operation.DIVIDE: ("Divide first number by second number", "Numerator", "Denominator (must not be zero)"),
}


def make_tool(op: Operation) -> FunctionTool:
    description, a_desc, b_desc = _DESCRIPTIONS[op]

    def _handler(args: dict[str, Any]) -> ToolResult:
        res = apply(op, args["a"], args["b"])
        if isinstance(res, Failure):
            return res
        return Ok(format_number(res.value))

    return FunctionTool(
        spec=ToolSpec(
            name=op.value,
            description=description,
            input_schema=object_schema(
                {"a": number_param(a_desc), "b": number_param(b_desc)},
                required=["a", "b"],
            ),
        ),
        fn=_handler,
    )


def make_tools() -> list[FunctionTool]:
    return [make_tool(op) for op in Operation]
