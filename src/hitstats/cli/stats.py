from __future__ import annotations

from functools import partial
from pathlib import Path
from typing import Annotated

import typer

from hitstats.cli._shared import color_allowed, resolve_stats_file, resolve_use_color, settings_or_exit
from hitstats.cli.exit_codes import EXIT_DATAERR, EXIT_NOINPUT, EXIT_OK, EXIT_USAGE
from hitstats.command import StatsCommand, split_args
from hitstats.core.config import Settings
from hitstats.errors import InvalidStatsFileError, StatsFileNotFoundError
from hitstats.model.threshold import AdaptiveThreshold, ThresholdSpec
from hitstats.store import MemoryStatsStore, load_stats

_BOOL_FALSE = False


def _build_command(args: list[str], *, adaptive: bool, settings: Settings, color: bool) -> StatsCommand:
    threshold: ThresholdSpec | int | str | None
    threshold, pattern = split_args(args)
    if adaptive:
        if threshold is not None:
            msg = "--adaptive cannot be combined with an explicit threshold"
            raise ValueError(msg)
        threshold = AdaptiveThreshold()
    if threshold is None:
        threshold = settings.threshold if settings.threshold is not None else 0
    if pattern is None:
        pattern = settings.pattern or ""
    return StatsCommand(threshold, pattern, color=color)


def _load_store(path: Path) -> MemoryStatsStore:
    try:
        return load_stats(path)
    except StatsFileNotFoundError as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(code=EXIT_NOINPUT) from exc
    except InvalidStatsFileError as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(code=EXIT_DATAERR) from exc


def stats_cmd(
    args: Annotated[
        list[str] | None,
        typer.Argument(
            metavar="[THRESHOLD] [PATTERN]",
            help="Minimum counter value (-1 or 'auto' for adaptive) and/or a name substring.",
            show_default=False,
        ),
    ] = None,
    adaptive: Annotated[
        bool,
        typer.Option("-a", "--adaptive", help="Derive the threshold from the average counter value."),
    ] = _BOOL_FALSE,
    stats_file: Annotated[
        Path | None,
        typer.Option("--stats-file", help="JSON file holding the counters (default: stats.json)."),
    ] = None,
    color: Annotated[
        bool,
        typer.Option("--color", help="Force color output"),
    ] = _BOOL_FALSE,
    no_color: Annotated[
        bool,
        typer.Option("--no-color", help="Disable color output"),
    ] = _BOOL_FALSE,
) -> None:
    """Show recorded counters above a threshold, optionally filtered by name."""
    settings = settings_or_exit()
    use_color = resolve_use_color(color=color, no_color=no_color, color_allowed=color_allowed(settings))

    try:
        command = _build_command(args or [], adaptive=adaptive, settings=settings, color=use_color)
    except ValueError as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(code=EXIT_USAGE) from exc

    store = _load_store(resolve_stats_file(stats_file, settings))
    command.execute(store, sink=partial(typer.echo, color=use_color))
    raise typer.Exit(code=EXIT_OK)


def register(app: typer.Typer) -> None:
    # "-1" must reach the command as a positional argument
    app.command("stats", context_settings={"ignore_unknown_options": True})(stats_cmd)


__all__ = ["register"]
