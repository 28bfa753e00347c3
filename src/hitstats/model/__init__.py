from hitstats.model.filters import entry_predicate, matches_pattern, meets_threshold
from hitstats.model.report import RankedEntry, StatsReport, rank_entries
from hitstats.model.threshold import (
    AdaptiveThreshold,
    FixedThreshold,
    ThresholdSpec,
    adaptive_threshold,
    is_threshold_token,
    parse_threshold,
    resolve_threshold,
    round_half_up,
)

__all__ = [
    "AdaptiveThreshold",
    "FixedThreshold",
    "RankedEntry",
    "StatsReport",
    "ThresholdSpec",
    "adaptive_threshold",
    "entry_predicate",
    "is_threshold_token",
    "matches_pattern",
    "meets_threshold",
    "parse_threshold",
    "rank_entries",
    "resolve_threshold",
    "round_half_up",
]
