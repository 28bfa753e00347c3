from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


def meets_threshold(value: int, threshold: int) -> bool:
    """Return ``True`` if *value* reaches the inclusive *threshold*."""
    return value >= threshold


def matches_pattern(name: str, pattern: str) -> bool:
    """Return ``True`` if *pattern* occurs in *name* (case-sensitive, unanchored)."""
    return pattern in name


def entry_predicate(threshold: int, pattern: str) -> Callable[[str, int], bool]:
    """Combine both filters into the predicate handed to the stats store."""

    def predicate(name: str, value: int) -> bool:
        return meets_threshold(value, threshold) and matches_pattern(name, pattern)

    return predicate


__all__ = ["entry_predicate", "matches_pattern", "meets_threshold"]
