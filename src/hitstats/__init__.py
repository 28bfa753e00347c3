from hitstats._meta import __version__, logger
from hitstats.command import StatsCommand
from hitstats.store import MemoryStatsStore, StatsStore, load_stats, save_stats

__all__ = [
    "MemoryStatsStore",
    "StatsCommand",
    "StatsStore",
    "__version__",
    "load_stats",
    "logger",
    "save_stats",
]
