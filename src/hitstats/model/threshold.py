"""Threshold specifiers and the adaptive threshold derivation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TypeAlias

from hitstats.core.config import ADAPTIVE_MARGIN, ADAPTIVE_SENTINEL
from hitstats.errors import InvalidThresholdError

_AUTO_WORD = "auto"


@dataclass(frozen=True, slots=True)
class FixedThreshold:
    """Inclusive minimum value a counter needs to be reported."""

    value: int = 0

    def __post_init__(self) -> None:
        if self.value < 0:
            msg = f"threshold must be non-negative: {self.value}"
            raise InvalidThresholdError(msg)

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class AdaptiveThreshold:
    """Threshold derived from the aggregate counts at report time."""

    def __str__(self) -> str:
        return "auto"


ThresholdSpec: TypeAlias = FixedThreshold | AdaptiveThreshold


def parse_threshold(raw: int | str | ThresholdSpec) -> ThresholdSpec:
    """Return the specifier described by *raw*.

    Accepts a non-negative integer (or its decimal string), the sentinel
    ``-1`` or the word ``auto``.
    """
    if isinstance(raw, FixedThreshold | AdaptiveThreshold):
        return raw
    if isinstance(raw, bool):
        msg = f"invalid threshold: {raw!r}"
        raise InvalidThresholdError(msg)

    if isinstance(raw, str):
        text = raw.strip()
        if text.lower() == _AUTO_WORD:
            return AdaptiveThreshold()
        try:
            number = int(text)
        except ValueError as exc:
            msg = f"invalid threshold: {raw!r}"
            raise InvalidThresholdError(msg) from exc
    else:
        number = raw

    if number == ADAPTIVE_SENTINEL:
        return AdaptiveThreshold()
    if number < 0:
        msg = f"threshold must be non-negative or {ADAPTIVE_SENTINEL}: {number}"
        raise InvalidThresholdError(msg)
    return FixedThreshold(number)


def is_threshold_token(raw: str) -> bool:
    """Return ``True`` if *raw* is written as a threshold (an integer or ``auto``)."""
    text = raw.strip()
    if text.lower() == _AUTO_WORD:
        return True
    try:
        int(text)
    except ValueError:
        return False
    return True


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties going towards positive infinity."""
    return math.floor(value + 0.5)


def adaptive_threshold(count: int, total: int) -> int:
    """Return the threshold sitting ``ADAPTIVE_MARGIN`` above the average value.

    With no records there is no average and the threshold is ``0``.
    """
    if count == 0:
        return 0
    average = total / count
    return round_half_up(average + ADAPTIVE_MARGIN * average)


def resolve_threshold(spec: ThresholdSpec, *, count: int, total: int) -> FixedThreshold:
    if isinstance(spec, FixedThreshold):
        return spec
    return FixedThreshold(adaptive_threshold(count, total))


__all__ = [
    "AdaptiveThreshold",
    "FixedThreshold",
    "ThresholdSpec",
    "adaptive_threshold",
    "is_threshold_token",
    "parse_threshold",
    "resolve_threshold",
    "round_half_up",
]
