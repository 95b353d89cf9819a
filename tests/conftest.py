from __future__ import annotations

import random
from datetime import datetime
from pathlib import Path

import pytest

from src.mcp_server.server import McpServer, build_server


FIXED_NOW = datetime(2024, 11, 5, 13, 45, 30)


@pytest.fixture
def tmp_workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    Provide an isolated working directory for tests that write to disk using
    relative paths.
    """
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def fixed_now() -> datetime:
    """A frozen wall-clock reading for time-dependent tools and resources."""
    return FIXED_NOW


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def server(seeded_rng: random.Random, fixed_now: datetime) -> McpServer:
    return build_server(rng=seeded_rng, now=lambda: fixed_now)


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """
    Default behavior: only run unit tests.

    If the user explicitly provides `-m ...`, we respect it and do not apply
    any extra deselection logic.
    """
    if config.option.markexpr:
        return

    deselect: list[pytest.Item] = []
    keep: list[pytest.Item] = []

    for item in items:
        if item.get_closest_marker("integration") or item.get_closest_marker("e2e"):
            deselect.append(item)
        else:
            keep.append(item)

    if deselect:
        config.hook.pytest_deselected(items=deselect)
        items[:] = keep
