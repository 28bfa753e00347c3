from hitstats.core.config import (
    ADAPTIVE_MARGIN,
    ADAPTIVE_SENTINEL,
    DEFAULT_STATS_FILE,
    LOG_FORMAT,
    Settings,
    load_settings,
)

__all__ = [
    "ADAPTIVE_MARGIN",
    "ADAPTIVE_SENTINEL",
    "DEFAULT_STATS_FILE",
    "LOG_FORMAT",
    "Settings",
    "load_settings",
]
