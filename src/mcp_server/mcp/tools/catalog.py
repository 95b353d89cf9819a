from __future__ import annotations

import random
from datetime import datetime

from . import arithmetic, calculator, clock, echo, random_number
from .clock import Clock
from .registry import ToolRegistry


def build_tool_registry(*, rng: random.Random | None = None, now: Clock = datetime.now) -> ToolRegistry:
    """Build the fixed tool catalog in declaration order.

    `rng` and `now` are the only nondeterministic inputs; tests inject seeded
    or frozen ones.
    """
    return ToolRegistry(
        [
            *arithmetic.make_tools(),
            echo.tool,
            clock.make_tool(clock=now),
            random_number.make_tool(rng=rng),
            calculator.tool,
        ]
    )
