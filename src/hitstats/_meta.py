from __future__ import annotations

import logging
from importlib.metadata import version

__version__ = version("hitstats")

logger = logging.getLogger("hitstats")

__all__ = ["__version__", "logger"]
