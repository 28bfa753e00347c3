"""Centralised exception hierarchy for hitstats."""

from __future__ import annotations


class HitstatsError(Exception):
    """Base class for all custom hitstats exceptions."""


class StatsStoreError(HitstatsError):
    """Base class for errors related to loading or saving the stats store."""


class StatsFileNotFoundError(StatsStoreError):
    """Stats file could not be located on disk."""


class InvalidStatsFileError(StatsStoreError):
    """Stats file was found but does not contain a valid counter mapping."""


class ConfigError(HitstatsError):
    """The ``[tool.hitstats]`` table holds a value of the wrong type."""


class InvalidThresholdError(HitstatsError, ValueError):
    """Threshold specifier is not a non-negative integer, ``-1`` or ``auto``."""


__all__ = [
    "ConfigError",
    "HitstatsError",
    "InvalidStatsFileError",
    "InvalidThresholdError",
    "StatsFileNotFoundError",
    "StatsStoreError",
]
