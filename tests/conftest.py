from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from pathlib import Path

import pytest
from click.testing import CliRunner

from hitstats.store import MemoryStatsStore

EXAMPLE_RECORDS = {"a/b/x": 10, "a/b/y": 30, "c/d": 5}


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Click CLI runner for invoking the command-line interface."""
    return CliRunner()


@pytest.fixture
def store() -> MemoryStatsStore:
    return MemoryStatsStore(EXAMPLE_RECORDS)


@pytest.fixture
def stats_file(tmp_path: Path) -> Callable[..., Path]:
    def write(records: Mapping[str, object] | object, *, filename: str = "stats.json") -> Path:
        path = tmp_path / filename
        path.write_text(json.dumps(records), encoding="utf-8")
        return path

    return write
