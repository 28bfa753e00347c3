"""Tests for configuration helpers and module side-effect behavior."""

from __future__ import annotations

import importlib
import logging
import sys
import textwrap
from typing import TYPE_CHECKING

import pytest

from hitstats.core.config import Settings, load_settings
from hitstats.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path


def _write_pyproject(tmp_path: Path, body: str) -> Path:
    py = tmp_path / "pyproject.toml"
    py.write_text(textwrap.dedent(body), encoding="utf-8")
    return py


def test_import_has_no_side_effects(monkeypatch: pytest.MonkeyPatch) -> None:
    """Importing the package should not configure logging."""
    basic_called = False

    def fake_basic(*args: object, **kwargs: object) -> None:
        nonlocal basic_called
        basic_called = True

    monkeypatch.setattr(logging, "basicConfig", fake_basic)
    for name in [m for m in sys.modules if m == "hitstats" or m.startswith("hitstats.")]:
        monkeypatch.delitem(sys.modules, name)

    importlib.import_module("hitstats.cli")

    assert not basic_called


def test_load_settings_reads_tool_table(tmp_path: Path) -> None:
    py = _write_pyproject(
        tmp_path,
        """
        [tool.hitstats]
        stats-file = "var/stats.json"
        threshold = "auto"
        pattern = "releases/"
        color = false
        """,
    )
    assert load_settings(py) == Settings(
        stats_file=tmp_path / "var/stats.json",
        threshold="auto",
        pattern="releases/",
        color=False,
    )


def test_load_settings_missing_file_is_empty(tmp_path: Path) -> None:
    assert load_settings(tmp_path / "pyproject.toml") == Settings()


def test_load_settings_defaults_to_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _write_pyproject(tmp_path, "[tool.hitstats]\nthreshold = 7\n")
    monkeypatch.chdir(tmp_path)
    assert load_settings().threshold == 7


def test_load_settings_without_table(tmp_path: Path) -> None:
    py = _write_pyproject(
        tmp_path,
        """
        [tool.pytest.ini_options]
        addopts = ["-q"]
        """,
    )
    assert load_settings(py) == Settings()


def test_load_settings_invalid_toml_is_logged(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    py = _write_pyproject(tmp_path, "[tool.hitstats\n")
    with caplog.at_level(logging.WARNING, logger="hitstats"):
        assert load_settings(py) == Settings()
    assert "Failed to parse" in caplog.text


def test_load_settings_ignores_unknown_keys(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    py = _write_pyproject(tmp_path, '[tool.hitstats]\nlimit = 3\npattern = "x"\n')
    with caplog.at_level(logging.WARNING, logger="hitstats"):
        assert load_settings(py) == Settings(pattern="x")
    assert "limit" in caplog.text


@pytest.mark.parametrize(
    "body",
    [
        "[tool.hitstats]\nthreshold = true\n",
        "[tool.hitstats]\nthreshold = 1.5\n",
        "[tool.hitstats]\npattern = 3\n",
        '[tool.hitstats]\ncolor = "yes"\n',
        "[tool.hitstats]\nstats-file = 1\n",
        '[tool]\nhitstats = "x"\n',
    ],
)
def test_load_settings_rejects_wrong_types(tmp_path: Path, body: str) -> None:
    py = _write_pyproject(tmp_path, body)
    with pytest.raises(ConfigError):
        load_settings(py)
