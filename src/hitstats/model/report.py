from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True, slots=True)
class RankedEntry:
    """A counter that passed filtering, with its 1-based position."""

    rank: int
    name: str
    value: int


@dataclass(frozen=True, slots=True)
class StatsReport:
    """Everything the statistics command renders for one invocation.

    Fields
    ------
    count:
        Number of tracked counters in the store.
    total:
        Sum of all counter values.
    threshold:
        Effective inclusive threshold used for filtering.
    pattern:
        Substring the counter names were filtered by.
    entries:
        Surviving counters, in the store's order.
    """

    count: int
    total: int
    threshold: int
    pattern: str
    entries: tuple[RankedEntry, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.entries


def rank_entries(stats: Mapping[str, int]) -> tuple[RankedEntry, ...]:
    """Number *stats* from 1 in iteration order."""
    return tuple(RankedEntry(rank, name, value) for rank, (name, value) in enumerate(stats.items(), start=1))


__all__ = ["RankedEntry", "StatsReport", "rank_entries"]
