"""Stats store: the counters the statistics command reports on."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Protocol

from hitstats._meta import logger
from hitstats.errors import InvalidStatsFileError, StatsFileNotFoundError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping
    from pathlib import Path


class StatsStore(Protocol):
    """Query interface the statistics command consumes."""

    def count_records(self) -> int: ...

    def sum_records(self) -> int: ...

    def fetch_stats(self, predicate: Callable[[str, int], bool]) -> dict[str, int]: ...


class MemoryStatsStore:
    """Insertion-ordered, in-memory counters keyed by name."""

    def __init__(self, records: Mapping[str, int] | Iterable[tuple[str, int]] | None = None) -> None:
        self._records: dict[str, int] = dict(records or {})

    def record(self, name: str, amount: int = 1) -> int:
        """Increase the counter *name* by *amount* and return its new value."""
        if amount < 0:
            msg = f"amount must be non-negative: {amount}"
            raise ValueError(msg)
        value = self._records.get(name, 0) + amount
        self._records[name] = value
        return value

    def records(self) -> dict[str, int]:
        return dict(self._records)

    def count_records(self) -> int:
        return len(self._records)

    def sum_records(self) -> int:
        return sum(self._records.values())

    def fetch_stats(self, predicate: Callable[[str, int], bool]) -> dict[str, int]:
        return {name: value for name, value in self._records.items() if predicate(name, value)}

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._records!r})"


def _validate(data: object, path: Path) -> dict[str, int]:
    if not isinstance(data, dict):
        msg = f"Stats file must contain a JSON object: {path}"
        raise InvalidStatsFileError(msg)
    for name, value in data.items():
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            msg = f"Invalid counter value for {name!r} in {path}: {value!r}"
            raise InvalidStatsFileError(msg)
    return data


def load_stats(path: Path) -> MemoryStatsStore:
    """Load counters from the JSON object stored at *path*."""
    if not path.is_file():
        msg = f"Stats file not found: {path}"
        raise StatsFileNotFoundError(msg)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except ValueError as exc:  # JSONDecodeError and UnicodeDecodeError
        msg = f"Stats file is not valid JSON: {path} ({exc})"
        raise InvalidStatsFileError(msg) from exc

    records = _validate(data, path)
    logger.debug("loaded %d counters from %s", len(records), path)
    return MemoryStatsStore(records)


def save_stats(store: MemoryStatsStore, path: Path) -> None:
    """Write the counters of *store* to *path*, keeping their order."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(store.records(), indent=2) + "\n", encoding="utf-8")
    logger.debug("saved %d counters to %s", len(store), path)


__all__ = ["MemoryStatsStore", "StatsStore", "load_stats", "save_stats"]
