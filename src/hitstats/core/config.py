"""Central configuration and constants for ``hitstats``."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path

from hitstats._meta import logger
from hitstats.errors import ConfigError

# Default logging format used by the CLI entry point.
LOG_FORMAT = "%(levelname)s: %(message)s"

# Threshold specifier that asks for a threshold derived from the data.
ADAPTIVE_SENTINEL = -1

# Fraction of the average added on top of it in adaptive mode.
ADAPTIVE_MARGIN = 0.2

DEFAULT_STATS_FILE = "stats.json"

_KNOWN_KEYS = frozenset({"stats-file", "threshold", "pattern", "color"})


@dataclass(frozen=True, slots=True)
class Settings:
    """Values read from the ``[tool.hitstats]`` table of ``pyproject.toml``."""

    stats_file: Path | None = None
    threshold: int | str | None = None
    pattern: str | None = None
    color: bool | None = None


def _read_pyproject(pyproject: Path) -> dict[str, object]:
    try:
        with pyproject.open("rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Failed to parse %s: %s", pyproject, e)
        return {}

    table = data.get("tool", {}).get("hitstats", {})
    if not isinstance(table, dict):
        msg = f"[tool.hitstats] in {pyproject} must be a table"
        raise ConfigError(msg)
    return table


def _expect(table: dict[str, object], key: str, *kinds: type) -> object:
    value = table.get(key)
    if value is None:
        return None
    # bool is an int subclass; only accept it where asked for
    if isinstance(value, kinds) and (bool in kinds or not isinstance(value, bool)):
        return value
    msg = f"[tool.hitstats] {key} has invalid type {type(value).__name__}"
    raise ConfigError(msg)


def load_settings(pyproject: Path | None = None) -> Settings:
    """Load settings from *pyproject* (``./pyproject.toml`` by default).

    A missing or unparsable file yields empty settings. Keys with the wrong
    type raise :class:`~hitstats.errors.ConfigError`.
    """
    path = pyproject if pyproject is not None else Path("./pyproject.toml").resolve()
    if not path.is_file():
        return Settings()

    table = _read_pyproject(path)
    for key in sorted(set(table) - _KNOWN_KEYS):
        logger.warning("Ignoring unknown [tool.hitstats] key: %s", key)

    stats_file = _expect(table, "stats-file", str)
    settings = Settings(
        # relative paths are resolved against the directory holding pyproject.toml
        stats_file=path.parent / stats_file if isinstance(stats_file, str) and stats_file.strip() else None,
        threshold=_expect(table, "threshold", int, str),  # type: ignore[arg-type]
        pattern=_expect(table, "pattern", str),  # type: ignore[arg-type]
        color=_expect(table, "color", bool),  # type: ignore[arg-type]
    )
    if settings != Settings():
        logger.debug("loaded settings from %s: %s", path, settings)
    return settings


__all__ = [
    "ADAPTIVE_MARGIN",
    "ADAPTIVE_SENTINEL",
    "DEFAULT_STATS_FILE",
    "LOG_FORMAT",
    "Settings",
    "load_settings",
]
