"""Plain-text rendering of a :class:`~hitstats.model.report.StatsReport`."""

from __future__ import annotations

import sys
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.text import Text

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from hitstats.model.report import StatsReport

EMPTY_MARKER = "[]"


def _emphasize(value: object, *, color: bool) -> str:
    """Return *value* as bold ANSI text when *color* is on, else unchanged."""
    text = str(value)
    if not color or not text:
        return text
    buffer = StringIO()
    console = Console(
        file=buffer,
        force_terminal=True,
        width=sys.maxsize,
        color_system="standard",
        highlight=False,
        soft_wrap=True,
    )
    console.print(Text(text, style="bold"), end="")
    return buffer.getvalue()


def render_lines(report: StatsReport, *, color: bool = False) -> list[str]:
    """Return the report as a list of lines, framed by blank lines."""
    marker = f"{EMPTY_MARKER} " if report.is_empty else ""
    threshold = _emphasize(report.threshold, color=color)
    pattern = _emphasize(report.pattern, color=color)

    lines = [
        "",
        "Statistics:",
        f"  Requests count: {report.count} (sum: {report.total})",
        f"  Recorded: {marker} (limiter: {threshold}, pattern: '{pattern}')",
    ]
    lines.extend(f"    {entry.rank}. ({entry.value}) {entry.name}" for entry in report.entries)
    lines.append("")
    return lines


def emit(lines: Iterable[str], sink: Callable[[str], object]) -> None:
    for line in lines:
        sink(line)


__all__ = ["EMPTY_MARKER", "emit", "render_lines"]
