from __future__ import annotations

import random
from datetime import datetime

import pytest

from src.mcp_server.mcp.tools import arithmetic, calculator, clock, echo, random_number
from src.mcp_server.mcp.tools.arithmetic import DIVISION_BY_ZERO, Operation
from src.mcp_server.outcome import Failure, FailureKind, Ok


@pytest.mark.parametrize(
    ("op", "a", "b", "expected"),
    [
        (Operation.ADD, 5.0, 3.0, "8.0"),
        (Operation.SUBTRACT, 5.0, 3.0, "2.0"),
        (Operation.MULTIPLY, 2.5, 4.0, "10.0"),
        (Operation.DIVIDE, 10.0, 4.0, "2.5"),
        (Operation.ADD, -1.5, 0.5, "-1.0"),
    ],
)
def test_arithmetic_tools_format_results_as_float_text(op: Operation, a: float, b: float, expected: str) -> None:
    assert arithmetic.make_tool(op).call({"a": a, "b": b}) == Ok(expected)


def test_divide_by_zero_is_a_business_failure() -> None:
    res = arithmetic.make_tool(Operation.DIVIDE).call({"a": 1.0, "b": 0.0})
    assert isinstance(res, Failure)
    assert res.kind is FailureKind.BUSINESS_RULE
    assert res.message == DIVISION_BY_ZERO == "Division by zero is not allowed"


def test_operation_symbols() -> None:
    assert [op.symbol for op in Operation] == ["+", "-", "×", "÷"]


def test_calculator_formats_two_decimals() -> None:
    res = calculator.tool.call({"operation": "multiply", "a": 2.5, "b": 4.0})
    assert res == Ok("Result: 2.50 × 4.00 = 10.00")


def test_calculator_divide_by_zero() -> None:
    res = calculator.tool.call({"operation": "divide", "a": 1.0, "b": 0.0})
    assert isinstance(res, Failure)
    assert res.message == DIVISION_BY_ZERO


def test_calculator_schema_enumerates_operations() -> None:
    prop = calculator.tool.spec.input_schema["properties"]["operation"]
    assert prop["enum"] == ["add", "subtract", "multiply", "divide"]
    assert calculator.tool.spec.input_schema["required"] == ["operation", "a", "b"]


def test_echo_prefixes_message() -> None:
    assert echo.tool.call({"message": "hello"}) == Ok("Echo: hello")
    assert echo.echo("") == "Echo: "


def test_current_time_uses_injected_clock(fixed_now: datetime) -> None:
    tool = clock.make_tool(clock=lambda: fixed_now)
    assert tool.call({}) == Ok("Current time: 2024-11-05 13:45:30")


def test_current_time_timezone_is_only_a_label(fixed_now: datetime) -> None:
    tool = clock.make_tool(clock=lambda: fixed_now)
    assert tool.call({"timezone": "Asia/Tokyo"}) == Ok(
        "Current time (requested timezone: Asia/Tokyo): 2024-11-05 13:45:30"
    )


def test_random_number_stays_within_inclusive_bounds() -> None:
    tool = random_number.make_tool(rng=random.Random(7))
    seen = set()
    for _ in range(1000):
        res = tool.call({"min": 1, "max": 10})
        assert isinstance(res, Ok)
        n = int(res.value)
        assert 1 <= n <= 10
        seen.add(n)
    assert seen == set(range(1, 11))


def test_random_number_degenerate_range() -> None:
    tool = random_number.make_tool(rng=random.Random(0))
    assert tool.call({"min": 5, "max": 5}) == Ok("5")


def test_random_number_inverted_range_fails() -> None:
    res = random_number.make_tool(rng=random.Random(0)).call({"min": 10, "max": 1})
    assert isinstance(res, Failure)
    assert res.kind is FailureKind.BUSINESS_RULE
    assert res.message == random_number.INVERTED_RANGE


def test_random_number_is_reproducible_with_seed() -> None:
    a = random_number.make_tool(rng=random.Random(42))
    b = random_number.make_tool(rng=random.Random(42))
    args = {"min": 1, "max": 1_000_000}
    assert [a.call(args) for _ in range(5)] == [b.call(args) for _ in range(5)]


def test_random_number_defaults_to_system_random(mocker) -> None:
    system = mocker.patch("random.SystemRandom")
    system.return_value.randint.return_value = 4
    tool = random_number.make_tool()
    assert tool.call({"min": 1, "max": 6}) == Ok("4")
    system.return_value.randint.assert_called_once_with(1, 6)
