"""Output formatting utilities for hitstats."""

from __future__ import annotations

from hitstats.render.text import EMPTY_MARKER, emit, render_lines

__all__ = ["EMPTY_MARKER", "emit", "render_lines"]
